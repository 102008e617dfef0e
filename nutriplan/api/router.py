from fastapi import APIRouter
from nutriplan.api.endpoints import bmi, meal

api_router = APIRouter()

api_router.include_router(meal.router, prefix="/meal", tags=["meal"])
api_router.include_router(bmi.router, prefix="/bmi", tags=["bmi"])

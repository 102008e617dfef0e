from fastapi import APIRouter, HTTPException, Query

from nutriplan.schemas.meal_plan import BMIResponse
from nutriplan.utils.nutrition import bmi_status, calculate_bmi, goal_from_status, suggestions_for_status

router = APIRouter()


@router.get("/classify", response_model=BMIResponse)
def classify_bmi(height: float = Query(..., description="Height in cm"),
                 weight: float = Query(..., description="Weight in kg")):
    try:
        bmi = calculate_bmi(height, weight)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    status = bmi_status(bmi)
    meal_tips, exercise_tips = suggestions_for_status(status)
    return BMIResponse(
        bmi=bmi,
        status=status,
        suggested_goal=goal_from_status(status),
        meal_tips=meal_tips,
        exercise_tips=exercise_tips,
    )

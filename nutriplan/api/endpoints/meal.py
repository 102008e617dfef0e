import logging
from typing import Any, Dict, Optional
from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from nutriplan.core.security import get_current_user
from nutriplan.meal_plans.ai_service import InvalidPlan, ai_generate
from nutriplan.meal_plans.prompts import normalize_plan_request
from nutriplan.meal_plans.providers import GenerationError
from nutriplan.schemas.meal_plan import MealPlanResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/generate", response_model=MealPlanResponse)
def generate_meal_plan(
    goal: Optional[str] = Query(None),
    dietary_preference: Optional[str] = Query(None),
    allergies: Optional[str] = Query(None),
    food_preferences: Optional[str] = Query(None),
    risky_foods: Optional[str] = Query(None),
    body_type: Optional[str] = Query(None),
    body_goal: Optional[str] = Query(None),
    calorie_target: Optional[str] = Query(None),
    user: Dict[str, Any] = Depends(get_current_user),
):
    """Generate a fresh 7-day plan. Nothing is stored."""
    request = normalize_plan_request({
        "goal": goal,
        "dietary_preference": dietary_preference,
        "allergies": allergies,
        "food_preferences": food_preferences,
        "risky_foods": risky_foods,
        "body_type": body_type,
        "body_goal": body_goal,
        "calorie_target": calorie_target,
    })
    try:
        plan = ai_generate(request)
    except GenerationError as e:
        logger.error("Meal plan generation failed for user %s: %s", user.get("sub"), e)
        return JSONResponse(status_code=500, content={"error": "Server error while generating meal plan"})

    if isinstance(plan, InvalidPlan):
        return JSONResponse(status_code=500, content={"error": "Meal plan generation failed"})
    return {"plan": plan}

from pydantic import BaseModel, Field
from typing import List, Optional

GOALS = ("gain", "lose", "maintain")


class PlanRequest(BaseModel):
    goal: str = "maintain"
    dietary_preference: str = ""
    allergies: str = ""
    food_preferences: str = ""
    risky_foods: str = ""
    body_type: str = ""
    body_goal: str = ""
    calorie_target: Optional[int] = None


class Meals(BaseModel):
    breakfast: List[str] = Field(default_factory=list)
    lunch: List[str] = Field(default_factory=list)
    dinner: List[str] = Field(default_factory=list)
    snacks: List[str] = Field(default_factory=list)


class MealDay(BaseModel):
    day: str
    calories: int = Field(gt=0)
    meals: Meals


class MealPlanResponse(BaseModel):
    plan: List[MealDay]


class BMIResponse(BaseModel):
    bmi: float
    status: str
    suggested_goal: str
    meal_tips: List[str]
    exercise_tips: List[str]

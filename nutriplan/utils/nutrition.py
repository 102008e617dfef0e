import math
from typing import Dict, List, Tuple

SUGGESTIONS: Dict[str, Tuple[List[str], List[str]]] = {
    # status: (meal tips, exercise tips)
    "Underweight": (
        ["Add protein-rich foods", "Healthy fats like avocado", "Eat more frequently"],
        ["Light strength training", "Yoga", "Stretching"],
    ),
    "Normal": (
        ["Balanced diet with veggies", "Stay hydrated", "Moderate portions"],
        ["Brisk walking", "Cardio 30 mins/day", "Light weights"],
    ),
    "Overweight": (
        ["Reduce sugar", "More vegetables & fiber", "Control portions"],
        ["Daily cardio", "Strength training", "HIIT"],
    ),
    "Obese": (
        ["Low-carb meals", "Vegetables & lean proteins", "Avoid fried foods"],
        ["Walking 1hr/day", "Low-impact cardio", "Supervised training"],
    ),
}


def calculate_bmi(height_cm: float, weight_kg: float) -> float:
    if not (math.isfinite(height_cm) and math.isfinite(weight_kg)):
        raise ValueError("height and weight must be finite numbers")
    if height_cm <= 0 or weight_kg <= 0:
        raise ValueError("height and weight must be positive")
    meters = height_cm / 100
    try:
        bmi = weight_kg / (meters * meters)
    except (ZeroDivisionError, OverflowError):
        bmi = math.inf
    if not math.isfinite(bmi):
        raise ValueError("height and weight are out of range")
    return round(bmi, 2)


def bmi_status(bmi: float) -> str:
    if bmi < 18.5:
        return "Underweight"
    if bmi < 25:
        return "Normal"
    if bmi < 30:
        return "Overweight"
    return "Obese"


def goal_from_status(status: str) -> str:
    """Default plan goal for a BMI status; empty when there is no status."""
    if not status:
        return ""
    if status == "Underweight":
        return "gain"
    if status == "Normal":
        return "maintain"
    return "lose"


def suggestions_for_status(status: str) -> Tuple[List[str], List[str]]:
    meals, exercise = SUGGESTIONS.get(status, ([], []))
    return list(meals), list(exercise)

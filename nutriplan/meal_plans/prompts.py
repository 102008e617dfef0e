from typing import Any, Dict, List, Mapping, Optional
from nutriplan.schemas.meal_plan import GOALS, PlanRequest
from .calories import coerce_calories

SYSTEM_PROMPT = (
    "You are a nutritionist specializing in healthy Filipino cuisine. "
    "Always return ONLY a JSON object with a single key 'days'. "
    "The value must be an array of exactly 7 day objects. "
    "Each day object must include a 'day' string, a 'calories' number representing the approximate "
    "total calories for that day, and a 'meals' object. The 'meals' object must include 'breakfast', "
    "'lunch', 'dinner', and 'snacks' arrays of meal strings that highlight nutrient-dense Filipino dishes "
    "using lean proteins, vegetables, fruits, and whole grains. "
    "Honor the stated goal, dietary preference, food preferences, body type, body goal, and allergies. "
    "Avoid risky foods or disease triggers provided by the user. "
    "Keep calories realistic (generally 1,500-2,300 kcal unless the goal or a calorie target suggests otherwise). "
    "No extra keys or narration."
)

USER_PROMPT = """
Generate a 7-day meal plan for:
- Goal: {goal}
- Dietary preference: {dietary_preference}
- Allergies: {allergies}
- Food preferences: {food_preferences}
- Risky foods / disease considerations: {risky_foods}
- Body type: {body_type}
- Body goal: {body_goal}
- Calorie target (per day): {calorie_target}

Focus on wholesome Filipino dishes (plenty of vegetables, fruits, legumes, lean meats or seafood, brown rice, adlai, and minimal added sugar) while aligning with the goal, dietary preference, and allergies.
Never include the listed allergens or risky foods in any meal.
Reflect food preferences and bias choices toward the stated body type and body goal.
Keep daily calories close to the provided calorie target if given; otherwise stay between 1,500 and 2,300 kcal, adjusted for the goal.

Return a JSON object that looks like:
{{
  "days": [
    {{
      "day": "Day 1",
      "calories": 1850,
      "meals": {{
        "breakfast": ["Oatmeal with berries"],
        "lunch": ["Grilled chicken salad"],
        "dinner": ["Salmon with quinoa and broccoli"],
        "snacks": ["Greek yogurt with honey"]
      }}
    }}
  ]
}}

Replace the example meals with the actual plan, provide exactly 7 sequential days (Day 1 through Day 7), and ensure every meal array contains one or more meal strings.
""".strip()

# query parameter -> accepted spellings
_ALIASES = {
    "goal": ("goal",),
    "dietary_preference": ("dietary_preference", "dietaryPreference"),
    "allergies": ("allergies",),
    "food_preferences": ("food_preferences", "foodPreferences"),
    "risky_foods": ("risky_foods", "riskyFoods"),
    "body_type": ("body_type", "bodyType"),
    "body_goal": ("body_goal", "bodyGoal"),
    "calorie_target": ("calorie_target", "calorieTarget"),
}


def _pick(params: Mapping[str, Any], field: str) -> str:
    for key in _ALIASES[field]:
        value = params.get(key)
        if value is None:
            continue
        text = str(value).strip()
        if text:
            return text
    return ""


def normalize_goal(goal: Any) -> str:
    g = str(goal or "").strip().lower()
    return g if g in GOALS else "maintain"


def normalize_plan_request(params: Optional[Mapping[str, Any]] = None) -> PlanRequest:
    """Build a PlanRequest from raw query parameters, filling defaults."""
    params = params or {}
    return PlanRequest(
        goal=normalize_goal(_pick(params, "goal")),
        dietary_preference=_pick(params, "dietary_preference"),
        allergies=_pick(params, "allergies"),
        food_preferences=_pick(params, "food_preferences"),
        risky_foods=_pick(params, "risky_foods"),
        body_type=_pick(params, "body_type"),
        body_goal=_pick(params, "body_goal"),
        calorie_target=coerce_calories(_pick(params, "calorie_target")),
    )


def build_messages(request: PlanRequest) -> List[Dict[str, str]]:
    target = f"{request.calorie_target} kcal" if request.calorie_target else "use a balanced target"
    user = USER_PROMPT.format(
        goal=request.goal,
        dietary_preference=request.dietary_preference or "none",
        allergies=request.allergies or "none",
        food_preferences=request.food_preferences or "none",
        risky_foods=request.risky_foods or "none",
        body_type=request.body_type or "unspecified",
        body_goal=request.body_goal or request.goal or "unspecified",
        calorie_target=target,
    )
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": user},
    ]

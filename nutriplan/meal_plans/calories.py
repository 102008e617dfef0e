"""Calorie hydration for generated and fallback meal plans.

Every day handed back to a caller carries a positive integer ``calories``
value. The value is taken from the day itself when usable, then from the
caller's calorie target, then from a goal-based constant.
"""
import math
import re
from typing import Any, Dict, Optional

GOAL_DEFAULTS: Dict[str, int] = {
    "gain": 2200,
    "lose": 1700,
    "maintain": 1900,
}
DEFAULT_CALORIES = 1900

_NUMBER = re.compile(r"(\d+(?:\.\d+)?)")


def coerce_calories(value: Any, fallback: Optional[int] = None) -> Optional[int]:
    """Turn ``value`` into a positive rounded integer, or return ``fallback``.

    Accepts numbers and strings such as ``"1,800"`` or ``"1800 kcal"``.
    Never raises.
    """
    if isinstance(value, bool):
        return fallback
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            # ints beyond float range
            return fallback
        if math.isfinite(number) and number > 0:
            return _positive(_round(number), fallback)
        return fallback
    if value is None or value == "":
        return fallback
    try:
        text = str(value)
    except Exception:
        return fallback
    match = _NUMBER.search(text.replace(",", ""))
    if not match:
        return fallback
    parsed = float(match.group(1))
    if not math.isfinite(parsed) or parsed <= 0:
        return fallback
    return _positive(_round(parsed), fallback)


def _positive(rounded: int, fallback: Optional[int]) -> Optional[int]:
    # 0.4 rounds to zero
    return rounded if rounded > 0 else fallback


def _round(value: float) -> int:
    # half-up, not banker's rounding
    return int(math.floor(value + 0.5))


def goal_default(goal: Any) -> int:
    key = goal.strip().lower() if isinstance(goal, str) else ""
    return GOAL_DEFAULTS.get(key, DEFAULT_CALORIES)


def default_calories(goal: Any = None, calorie_target: Any = None) -> int:
    return coerce_calories(calorie_target, goal_default(goal))


def hydrate_day(day: Any, default: int) -> Any:
    if not isinstance(day, dict):
        return day
    return {**day, "calories": coerce_calories(day.get("calories"), default)}


def hydrate_calories(plan: Any, goal: Any = None, calorie_target: Any = None) -> Any:
    """Fill in ``calories`` on every day of ``plan``.

    ``plan`` may be a list of days or an object with a ``days`` list; the same
    shape is returned. Anything else is returned untouched.
    """
    default = default_calories(goal, calorie_target)
    if isinstance(plan, list):
        return [hydrate_day(day, default) for day in plan]
    if isinstance(plan, dict) and isinstance(plan.get("days"), list):
        return {**plan, "days": [hydrate_day(day, default) for day in plan["days"]]}
    return plan

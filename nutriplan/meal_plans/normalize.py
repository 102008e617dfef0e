"""Reshape untrusted meal-plan payloads into a uniform list of days.

The server, an older server build or the bundled fallback data may hand back a
plan in several shapes. ``classify_payload`` decides which one it is, in a
fixed order, and ``normalize_plan`` turns every shape into the same list of
``{"day", "calories", "meals"}`` dicts. Nothing in here raises on bad input.
"""
import re
from enum import Enum
from typing import Any, Dict, List

MEAL_KEYS = ("breakfast", "lunch", "dinner", "snacks")

_SPLIT = re.compile(r"[\n,]")


class PlanShape(str, Enum):
    DAYS_OBJECT = "days_object"     # {"days": [...]}
    NESTED_PLAN = "nested_plan"     # {"plan": {"days": [...]}}
    DAY_LIST = "day_list"           # [...]
    SINGLE_DAY = "single_day"       # {...}
    EMPTY = "empty"


def classify_payload(payload: Any) -> PlanShape:
    if isinstance(payload, dict):
        if isinstance(payload.get("days"), list):
            return PlanShape.DAYS_OBJECT
        plan = payload.get("plan")
        if isinstance(plan, dict) and isinstance(plan.get("days"), list):
            return PlanShape.NESTED_PLAN
    if isinstance(payload, (list, tuple)):
        return PlanShape.DAY_LIST
    if isinstance(payload, dict):
        return PlanShape.SINGLE_DAY
    return PlanShape.EMPTY


def day_entries(payload: Any) -> List[Any]:
    shape = classify_payload(payload)
    if shape is PlanShape.DAYS_OBJECT:
        return list(payload["days"])
    if shape is PlanShape.NESTED_PLAN:
        return list(payload["plan"]["days"])
    if shape is PlanShape.DAY_LIST:
        return list(payload)
    if shape is PlanShape.SINGLE_DAY:
        return [payload]
    return []


def ensure_array(value: Any) -> List[str]:
    """Coerce a meal value into a list of non-empty strings.

    A single string is split on newlines and commas, so
    ``"Rice, egg, and coffee"`` becomes three items.
    """
    if not value:
        return []
    if isinstance(value, (list, tuple)):
        items = [str(item).strip() for item in value if item is not None]
        return [item for item in items if item]
    if isinstance(value, str):
        return [piece.strip() for piece in _SPLIT.split(value) if piece.strip()]
    text = str(value).strip()
    return [text] if text else []


def empty_meals() -> Dict[str, List[str]]:
    return {key: [] for key in MEAL_KEYS}


def normalize_day(entry: Any, index: int) -> Dict[str, Any]:
    title = f"Day {index + 1}"
    if not isinstance(entry, dict):
        return {"day": title, "calories": None, "meals": empty_meals()}

    label = entry.get("day")
    if label is not None and str(label).strip():
        title = str(label).strip()

    source = entry.get("meals")
    if not isinstance(source, dict):
        # meals listed at the top level of the day
        source = entry
    return {
        "day": title,
        "calories": entry.get("calories"),
        "meals": {key: ensure_array(source.get(key)) for key in MEAL_KEYS},
    }


def normalize_plan(payload: Any) -> List[Dict[str, Any]]:
    return [normalize_day(entry, i) for i, entry in enumerate(day_entries(payload))]

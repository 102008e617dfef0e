from typing import Any, Dict, List
from jsonschema import Draft202012Validator

PLAN_DAY_COUNT = 7

_MEAL_LIST = {"type": "array", "items": {"type": "string"}}

MEAL_PLAN_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "required": ["days"],
    "additionalProperties": False,
    "properties": {
        "days": {
            "type": "array",
            "minItems": PLAN_DAY_COUNT,
            "maxItems": PLAN_DAY_COUNT,
            "items": {
                "type": "object",
                "required": ["day", "calories", "meals"],
                "additionalProperties": False,
                "properties": {
                    "day": {"type": "string"},
                    "calories": {"type": "number", "minimum": 800, "maximum": 4000},
                    "meals": {
                        "type": "object",
                        "required": ["breakfast", "lunch", "dinner", "snacks"],
                        "additionalProperties": False,
                        "properties": {
                            "breakfast": _MEAL_LIST,
                            "lunch": _MEAL_LIST,
                            "dinner": _MEAL_LIST,
                            "snacks": _MEAL_LIST,
                        },
                    },
                },
            },
        },
    },
}

SCHEMA_NAME = "weekly_meal_plan"

_validator = Draft202012Validator(MEAL_PLAN_SCHEMA)


def schema_errors(data: Any) -> List[str]:
    """Human readable schema violations for ``data``, empty when it conforms."""
    errors = sorted(_validator.iter_errors(data), key=lambda e: list(e.absolute_path))
    return [f"{'/'.join(map(str, e.absolute_path)) or '<root>'}: {e.message}" for e in errors]


# Keys the Gemini response_schema accepts; the rest are dropped before sending.
_GEMINI_KEYS = {"type", "properties", "required", "items", "description", "enum", "format", "nullable"}


def gemini_schema(schema: Dict[str, Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for key, value in schema.items():
        if key not in _GEMINI_KEYS:
            continue
        if key == "properties":
            out[key] = {name: gemini_schema(sub) for name, sub in value.items()}
        elif key == "items":
            out[key] = gemini_schema(value)
        else:
            out[key] = value
    return out

import json, re, logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from tenacity import Retrying, retry_if_exception_type, stop_after_attempt

from nutriplan.core.config import Settings, get_settings
from nutriplan.schemas.meal_plan import PlanRequest
from .calories import hydrate_calories
from .normalize import normalize_plan
from .prompts import build_messages
from .providers import GenerationResult, PlanProvider, TransientGenerationError, get_provider
from .schema import MEAL_PLAN_SCHEMA, schema_errors

logger = logging.getLogger(__name__)

_FENCE = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```", re.IGNORECASE)


@dataclass
class InvalidPlan:
    """The service answered, but not with anything we could parse."""
    raw: str
    error: str = "Invalid AI format"


def try_parse_json(text: Optional[str]) -> Optional[Any]:
    """Parse model output, unwrapping a ```json fence when present."""
    if not text:
        return None
    m = _FENCE.search(text)
    candidate = m.group(1) if m else text.strip()
    try:
        return json.loads(candidate)
    except ValueError:
        return None


def _days_of(data: Any) -> Any:
    if isinstance(data, dict) and "days" in data:
        return data["days"]
    return data


def _call(provider: PlanProvider, messages: List[Dict[str, str]], retries: int) -> GenerationResult:
    # one extra attempt per allowed retry, for timeouts and dropped connections only
    for attempt in Retrying(
        stop=stop_after_attempt(1 + max(retries, 0)),
        retry=retry_if_exception_type(TransientGenerationError),
        reraise=True,
    ):
        with attempt:
            if attempt.retry_state.attempt_number > 1:
                logger.info("Retrying meal plan generation (attempt %d)", attempt.retry_state.attempt_number)
            return provider.generate(messages, MEAL_PLAN_SCHEMA)


def ai_generate(
    request: PlanRequest,
    provider: Optional[PlanProvider] = None,
    settings: Optional[Settings] = None,
) -> Union[List[Dict[str, Any]], InvalidPlan]:
    """Generate a hydrated list of days for ``request``.

    Returns ``InvalidPlan`` when the output cannot be parsed. Raises
    ``GenerationError`` when the service itself fails.
    """
    settings = settings or get_settings()
    if provider is None:
        provider = get_provider(settings)

    result = _call(provider, build_messages(request), settings.GENERATION_RETRIES)

    data = result.parsed if isinstance(result.parsed, (dict, list)) else try_parse_json(result.raw)
    if not isinstance(data, (dict, list)):
        logger.warning("Failed to parse AI JSON. Raw: %s", result.raw)
        return InvalidPlan(raw=result.raw)
    if isinstance(data, dict) and not isinstance(data.get("days"), list):
        logger.warning("AI JSON has no 'days' list. Raw: %s", result.raw or json.dumps(data)[:500])
        return InvalidPlan(raw=result.raw or json.dumps(data))

    problems = schema_errors(data if isinstance(data, dict) else {"days": data})
    if problems:
        logger.warning("AI plan does not match schema (%d issues): %s", len(problems), "; ".join(problems[:5]))

    days = normalize_plan(_days_of(data))
    if not days:
        logger.warning("AI plan contained no days. Raw: %s", result.raw or json.dumps(data)[:500])
        return InvalidPlan(raw=result.raw or json.dumps(data))
    return hydrate_calories(days, request.goal, request.calorie_target)

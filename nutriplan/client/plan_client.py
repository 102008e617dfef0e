"""Client side of the meal plan: fetch, normalize, fall back.

``PlanClient`` talks to ``GET /api/meal/generate`` and keeps the plan the page
should render in ``state``. Every fetch takes a ticket; only the most recent
ticket may write ``state``, so a slow response for old parameters never
replaces the plan for newer ones.
"""
import itertools
import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

import httpx

from nutriplan.core.config import get_settings
from nutriplan.meal_plans.calories import hydrate_calories
from nutriplan.meal_plans.fallback import fallback_plan
from nutriplan.meal_plans.normalize import normalize_plan
from nutriplan.meal_plans.prompts import normalize_goal
from nutriplan.utils.nutrition import goal_from_status

logger = logging.getLogger(__name__)

LOGIN_REQUIRED_MESSAGE = "Please log in to generate your personalized meal plan."
SESSION_EXPIRED_MESSAGE = "Your session has expired. Please log in again."
UNREACHABLE_MESSAGE = "We couldn't reach the meal planner, so here's a sample plan instead."

PLAN_PARAMS = (
    "goal", "dietary_preference", "allergies", "food_preferences",
    "risky_foods", "body_type", "body_goal", "calorie_target",
)


@dataclass
class PlanState:
    days: List[Dict[str, Any]] = field(default_factory=list)
    source: str = "none"            # none | generated | fallback
    warning: str = ""
    login_required: bool = False
    loading: bool = False


def resolve_plan_params(profile: Optional[Mapping[str, Any]] = None, bmi_status: str = "") -> Dict[str, str]:
    """Plan parameters for a page: profile goal, then BMI goal, then maintain."""
    profile = profile or {}
    goal = profile.get("goal") or goal_from_status(bmi_status) or "maintain"
    return {
        "goal": str(goal),
        "dietary_preference": str(profile.get("dietaryPreference") or profile.get("dietary_preference") or ""),
        "allergies": str(profile.get("allergies") or ""),
    }


class PlanClient:
    def __init__(self, token: Optional[str] = None, base_url: Optional[str] = None,
                 http: Optional[httpx.Client] = None, timeout: Optional[float] = None):
        settings = get_settings()
        self.token = token
        self.http = http or httpx.Client(
            base_url=base_url or settings.API_BASE_URL,
            timeout=timeout or settings.GENERATION_TIMEOUT + 5,
        )
        self.state = PlanState()
        self._tickets = itertools.count(1)
        self._latest = 0
        self._lock = threading.Lock()

    # ---------- tickets ----------
    def begin(self) -> int:
        with self._lock:
            self._latest = next(self._tickets)
            return self._latest

    def commit(self, ticket: int, state: PlanState) -> bool:
        with self._lock:
            if ticket != self._latest:
                logger.debug("Discarding stale plan response (ticket %d, latest %d)", ticket, self._latest)
                return False
            self.state = state
            return True

    # ---------- fetching ----------
    def load_plan(self, params: Optional[Mapping[str, Any]] = None) -> PlanState:
        """Fetch a plan for ``params`` and commit it if still current.

        Returns the state this call produced, committed or not.
        """
        params = {k: v for k, v in (params or {}).items() if k in PLAN_PARAMS and v not in (None, "")}
        goal = normalize_goal(params.get("goal"))
        target = params.get("calorie_target")
        ticket = self.begin()

        if not self.token:
            state = PlanState(login_required=True, warning=LOGIN_REQUIRED_MESSAGE)
            self.commit(ticket, state)
            return state

        with self._lock:
            if ticket == self._latest:
                self.state.loading = True

        try:
            response = self.http.get(
                "/meal/generate",
                params=params,
                headers={"Authorization": f"Bearer {self.token}"},
            )
            if response.status_code == 401:
                state = self._expired()
                if self.commit(ticket, state):
                    self.token = None
                return state
            response.raise_for_status()
            body = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Meal plan fetch failed, showing sample plan: %s", e)
            state = self._fallback(goal, target)
            self.commit(ticket, state)
            return state

        payload = body.get("plan", body) if isinstance(body, dict) else body
        days = hydrate_calories(normalize_plan(payload), goal, target)
        if not days:
            logger.warning("Meal plan response had no days, showing sample plan")
            state = self._fallback(goal, target)
        else:
            state = PlanState(days=days, source="generated")
        self.commit(ticket, state)
        return state

    def _expired(self) -> PlanState:
        return PlanState(login_required=True, warning=SESSION_EXPIRED_MESSAGE)

    def _fallback(self, goal: str, target: Any) -> PlanState:
        return PlanState(days=fallback_plan(goal, target), source="fallback", warning=UNREACHABLE_MESSAGE)

    def close(self) -> None:
        self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

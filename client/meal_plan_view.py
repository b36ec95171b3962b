"""View model for the meal plan dashboard.

The view moves between four states: LOADING, NOT_FOUND, ERROR and READY.
Fetch failures are typed so that a missing plan is never retried while
other failures get a bounded number of extra attempts.
"""

import enum
from typing import Callable, Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from core.logger import get_logger
from schemas.meal_schema import MealPlanData
from views import components

logger = get_logger("client.meal_plan_view")

PLAN_PATH = "/api/get-plan"
NOT_FOUND_MESSAGE = "No meal plan found"
FAILED_MESSAGE = "Failed to fetch meal plan"
DEFAULT_MAX_RETRIES = 2


class ViewState(str, enum.Enum):
    LOADING = "loading"
    NOT_FOUND = "not_found"
    ERROR = "error"
    READY = "ready"


class FetchErrorKind(str, enum.Enum):
    NOT_FOUND = "not_found"
    FAILED = "failed"


class PlanFetchError(Exception):
    def __init__(self, kind: FetchErrorKind, message: str):
        self.kind = kind
        self.message = message
        super().__init__(message)

    @classmethod
    def not_found(cls) -> "PlanFetchError":
        return cls(FetchErrorKind.NOT_FOUND, NOT_FOUND_MESSAGE)

    @classmethod
    def failed(cls, message: str = FAILED_MESSAGE) -> "PlanFetchError":
        return cls(FetchErrorKind.FAILED, message)


PlanFetcher = Callable[[], MealPlanData]


class HttpPlanFetcher:
    """Fetches the viewer's plan from `GET /api/get-plan` with httpx."""

    def __init__(self, http: httpx.Client):
        self.http = http

    def __call__(self) -> MealPlanData:
        try:
            response = self.http.get(PLAN_PATH, headers={"Content-Type": "application/json"})
        except httpx.HTTPError as exc:
            logger.warning("Plan fetch transport error: %s", exc)
            raise PlanFetchError.failed()

        if response.status_code == 404:
            raise PlanFetchError.not_found()
        if response.is_error:
            raise PlanFetchError.failed()

        try:
            return MealPlanData.model_validate(response.json())
        except (ValueError, PydanticValidationError):
            logger.warning("Plan payload could not be parsed")
            raise PlanFetchError.failed()


def should_retry(failure_count: int, error: PlanFetchError, max_retries: int = DEFAULT_MAX_RETRIES) -> bool:
    """Retry policy: never for a missing plan, otherwise `max_retries` times."""
    if error.kind is FetchErrorKind.NOT_FOUND:
        return False
    return failure_count <= max_retries


class MealPlanView:
    """Loads the current plan and renders the matching state.

    Args:
        fetch: Callable returning `MealPlanData` or raising `PlanFetchError`.
        max_retries: Extra attempts after the first failure.
    """

    def __init__(self, fetch: PlanFetcher, max_retries: int = DEFAULT_MAX_RETRIES):
        self.fetch = fetch
        self.max_retries = max_retries
        self.state = ViewState.LOADING
        self.plan: Optional[MealPlanData] = None
        self.error: Optional[PlanFetchError] = None
        self.attempts = 0

    def load(self) -> ViewState:
        """Run the fetch with the retry policy and settle on a final state."""
        self.state = ViewState.LOADING
        self.attempts = 0
        failures = 0
        while True:
            self.attempts += 1
            try:
                plan = self.fetch()
            except PlanFetchError as exc:
                failures += 1
                if should_retry(failures, exc, self.max_retries):
                    logger.info("Plan fetch failed (attempt %s), retrying: %s", self.attempts, exc.message)
                    continue
                self._fail(exc)
                return self.state
            self.plan = plan
            self.error = None
            self.state = ViewState.READY
            return self.state

    def retry(self) -> ViewState:
        """Re-enter LOADING and fetch again."""
        return self.load()

    def _fail(self, error: PlanFetchError) -> None:
        self.plan = None
        self.error = error
        if error.kind is FetchErrorKind.NOT_FOUND:
            self.state = ViewState.NOT_FOUND
        else:
            logger.warning("Plan fetch failed after %s attempts: %s", self.attempts, error.message)
            self.state = ViewState.ERROR

    def render(self) -> str:
        if self.state is ViewState.LOADING:
            return components.render_loading("Loading your meal plan...")
        if self.state is ViewState.NOT_FOUND:
            return components.render_empty_state(is_error=True, is_not_found=True)
        if self.state is ViewState.ERROR:
            return components.render_empty_state(is_error=True, error_message=self.error.message)
        if self.plan is None:
            return components.render_empty_state()
        return components.render_dashboard(self.plan)

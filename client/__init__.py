"""Viewer-facing orchestration: subscription flow and meal plan view model."""

from .checkout_client import CheckoutClient
from .subscription import SubscriptionFlow, SubscriptionOutcome
from .meal_plan_view import MealPlanView, ViewState, PlanFetchError, FetchErrorKind, HttpPlanFetcher

__all__ = [
    "CheckoutClient",
    "SubscriptionFlow",
    "SubscriptionOutcome",
    "MealPlanView",
    "ViewState",
    "PlanFetchError",
    "FetchErrorKind",
    "HttpPlanFetcher",
]

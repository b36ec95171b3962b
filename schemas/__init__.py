"""Pydantic schema package for request and response models."""

from .user_schema import UserResponse
from .meal_schema import Meal, MealPlanData, MEAL_NAMES
from .checkout_schema import CheckoutRequest, CheckoutResponse
from .plan_schema import Plan
from .webhook_schema import ClerkUserData, ClerkEmailAddress

__all__ = [
    "UserResponse",
    "Meal",
    "MealPlanData",
    "MEAL_NAMES",
    "CheckoutRequest",
    "CheckoutResponse",
    "Plan",
    "ClerkUserData",
    "ClerkEmailAddress",
]

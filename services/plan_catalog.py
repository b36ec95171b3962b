"""Static pricing tiers offered on the subscription page."""

from typing import List, Optional
from schemas.plan_schema import Plan

FREE_PLAN = "free"

PLANS: List[Plan] = [
    Plan(
        name="Free",
        price="$0",
        period="month",
        description="Try AI meal planning with the basics",
        features=[
            "1 AI-generated meal plan",
            "Daily macro targets",
            "Basic nutrition breakdown",
        ],
        variant="outline",
        button_text="Get Started",
    ),
    Plan(
        name="Pro",
        price="$9.99",
        period="month",
        description="Personalized plans that adapt to your progress",
        features=[
            "Unlimited meal plans",
            "Body composition tracking",
            "Ingredient lists and step-by-step recipes",
            "Regenerate any meal",
        ],
        popular=True,
        button_text="Subscribe to Pro",
    ),
    Plan(
        name="Premium",
        price="$99.99",
        period="year",
        description="Everything in Pro, billed yearly",
        features=[
            "Everything in Pro",
            "Priority plan generation",
            "Two months free",
        ],
        variant="secondary",
        button_text="Go Premium",
    ),
]


def get_plan(plan_type: str) -> Optional[Plan]:
    """Return the tier whose lower-cased name equals `plan_type`, if any."""
    key = plan_type.lower()
    for plan in PLANS:
        if plan.name.lower() == key:
            return plan
    return None


def is_free(plan_type: str) -> bool:
    return plan_type == FREE_PLAN

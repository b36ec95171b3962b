"""Read access to the viewer's current meal plan."""

import json
from sqlalchemy.orm import Session
from core.exceptions import NotFoundError
from core.logger import get_logger
from core.repository import MealPlanRepository
from database.models import MealPlan
from schemas.meal_schema import MealPlanData

logger = get_logger("services.meal_plan_service")

NO_MEAL_PLAN_MESSAGE = "No meal plan found"


def to_meal_plan_data(plan: MealPlan) -> MealPlanData:
    """Convert a stored row into the wire model, keeping meal order."""
    return MealPlanData(
        calories=plan.calories,
        protein=plan.protein,
        carbs=plan.carbs,
        fat=plan.fat,
        current_weight=plan.current_weight,
        body_fat=plan.body_fat,
        muscle_mass=plan.muscle_mass,
        goal=plan.goal,
        meals=json.loads(plan.meals),
    )


def get_plan_for_user(db: Session, user_id: str) -> MealPlanData:
    """Return the newest plan for `user_id`.

    Raises:
        NotFoundError: If the user has no stored plan.
    """
    plan = MealPlanRepository(db).latest_for_user(user_id)
    if plan is None:
        logger.info("No meal plan for user %s", user_id)
        raise NotFoundError(NO_MEAL_PLAN_MESSAGE, resource="MealPlan")
    return to_meal_plan_data(plan)

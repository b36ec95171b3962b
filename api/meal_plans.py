"""Meal plan router: serves the viewer's current plan."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from api.dependencies import require_viewer
from core.viewer import Viewer
from database.deps import get_db_read
from services.meal_plan_service import get_plan_for_user

router = APIRouter(prefix="/api", tags=["meal-plans"])


@router.get("/get-plan")
def get_plan(viewer: Viewer = Depends(require_viewer), db: Session = Depends(get_db_read)):
    """Return the viewer's newest `MealPlanData` with camelCase keys.

    Raises:
        AuthenticationError: No signed-in viewer (401).
        NotFoundError: The viewer has no plan yet (404).
    """
    return get_plan_for_user(db, viewer.id).to_wire()

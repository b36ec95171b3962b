"""Schemas for meal plan payloads served by `/api/get-plan`."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Dict, List

MEAL_NAMES = ("breakfast", "lunch", "dinner", "snack")


class Meal(BaseModel):
    """A single meal with macros, ingredients and preparation steps."""

    model_config = ConfigDict(frozen=True)

    title: str
    calories: float
    protein: float
    carbs: float
    fat: float
    ingredients: List[str] = []
    instructions: List[str] = []


class MealPlanData(BaseModel):
    """Per-user plan snapshot.

    Field names are camelCase on the wire. `meals` keeps the insertion order
    of the incoming mapping and must hold exactly the four named meals.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    calories: float
    protein: float
    carbs: float
    fat: float
    current_weight: float = Field(..., alias="currentWeight")
    body_fat: float = Field(..., alias="bodyFat")
    muscle_mass: float = Field(..., alias="muscleMass")
    goal: str
    meals: Dict[str, Meal]

    @field_validator("meals")
    @classmethod
    def _four_named_meals(cls, value: Dict[str, Meal]) -> Dict[str, Meal]:
        if set(value) != set(MEAL_NAMES):
            raise ValueError(f"meals must contain exactly: {', '.join(MEAL_NAMES)}")
        return value

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)

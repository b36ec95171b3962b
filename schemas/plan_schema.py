"""Schema for pricing tiers shown on the subscription page."""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal


class Plan(BaseModel):
    """A billing tier. Static configuration, never persisted per user."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str
    price: str
    period: str
    description: str
    features: List[str]
    popular: bool = False
    variant: Literal["default", "outline", "secondary"] = "default"
    button_text: str = Field(..., alias="buttonText")

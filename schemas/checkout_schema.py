"""Schemas for the checkout-initiation endpoint."""

from pydantic import BaseModel, ConfigDict, Field


class CheckoutRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(..., min_length=1, alias="userId", examples=["user_2abc"])
    plan_type: str = Field(..., min_length=1, alias="planType", examples=["pro"])
    email: str = Field(..., min_length=1, examples=["jane@example.com"])


class CheckoutResponse(BaseModel):
    url: str

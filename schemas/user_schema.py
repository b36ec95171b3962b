"""Schemas for user records returned by the API."""

from pydantic import BaseModel, ConfigDict
from datetime import datetime
from typing import Optional


class UserResponse(BaseModel):
    """Stored user record returned by the account webhook."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

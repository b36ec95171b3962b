"""Schemas for identity-provider (Clerk) webhook payloads.

Every field is optional so that missing values reach the handler and are
reported as 400 errors with a specific message instead of a 422.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class ClerkEmailAddress(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    email_address: Optional[str] = None


class ClerkUserData(BaseModel):
    """The `data` object of a Clerk `user.created` / `user.updated` event."""

    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = Field(None, examples=["user_2abc"])
    full_name: Optional[str] = Field(None, examples=["Jane Doe"])
    email_addresses: Optional[List[ClerkEmailAddress]] = None
    primary_email_address_id: Optional[str] = Field(None, examples=["idn_1"])

    def primary_email(self) -> Optional[str]:
        """Return the primary address, falling back to the first listed one."""
        addresses = self.email_addresses or []
        for entry in addresses:
            if entry.id is not None and entry.id == self.primary_email_address_id:
                if entry.email_address:
                    return entry.email_address
                break
        if addresses:
            return addresses[0].email_address or None
        return None

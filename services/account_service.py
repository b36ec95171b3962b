"""Account reconciliation for identity-provider user events.

The local user record is keyed by email. The provider's user id becomes the
primary key when a record is created and is never rewritten afterwards.
"""

from typing import Any, Optional
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from core.exceptions import ValidationError, DatabaseError
from core.logger import get_logger
from core.repository import UserRepository
from database.models import User
from schemas.webhook_schema import ClerkUserData

logger = get_logger("services.account_service")


class AccountService:
    """Parses webhook payloads and upserts the matching user."""

    def parse_user_data(self, data: Optional[Any]) -> ClerkUserData:
        """Validate the `data` object of a webhook body.

        Raises:
            ValidationError: If `data` is absent or not an object.
        """
        if data is None or not isinstance(data, dict):
            raise ValidationError("Missing required data")
        try:
            return ClerkUserData.model_validate(data)
        except PydanticValidationError as exc:
            logger.warning("Malformed webhook data: %s", exc.errors())
            raise ValidationError("Missing required data")

    def sync_user(self, db: Session, data: Optional[Any]) -> User:
        """Create or update the local user described by a webhook `data` object.

        Validation is completed before the store is touched.

        Raises:
            ValidationError: For a missing payload, user id or email.
            DatabaseError: If the upsert fails; the session is rolled back.
        """
        user_data = self.parse_user_data(data)
        email = user_data.primary_email()

        if not user_data.id:
            raise ValidationError("User ID not found")
        if not email:
            raise ValidationError("User email not found")

        try:
            user = UserRepository(db).upsert_by_email(
                user_id=user_data.id,
                email=email,
                name=user_data.full_name or "",
            )
        except SQLAlchemyError as exc:
            db.rollback()
            logger.exception("Account upsert failed for provider user %s", user_data.id)
            raise DatabaseError("Internal server error", details=str(exc))

        if user.id != user_data.id:
            logger.info("Email %s already belongs to user %s; ignoring provider id %s", email, user.id, user_data.id)
        logger.info("Synced user %s", user.id)
        return user


# export singleton
account_service = AccountService()
__all__ = ["AccountService", "account_service"]

"""Identity-provider webhook router.

Clerk posts user events here; the handler keeps the local user table in
sync, keyed by email.
"""

import json
from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import Session
from database.deps import get_db_write
from core.logger import get_logger
from schemas import UserResponse
from services.account_service import account_service

logger = get_logger("api.webhooks")
router = APIRouter(prefix="/api/webhook", tags=["webhooks"])


async def _read_json(request: Request):
    body = await request.body()
    if not body:
        return None
    try:
        return json.loads(body)
    except ValueError:
        logger.warning("Webhook body is not valid JSON")
        return None


@router.post("/clerk", response_model=UserResponse)
async def clerk_webhook(request: Request, db: Session = Depends(get_db_write)):
    """Create or update the local user described by a Clerk user event.

    Returns:
        The stored user record.

    Raises:
        ValidationError: Missing payload, user id or email (400).
        DatabaseError: The upsert failed (500).
    """
    payload = await _read_json(request)
    data = payload.get("data") if isinstance(payload, dict) else None
    user = await run_in_threadpool(account_service.sync_user, db, data)
    return UserResponse.model_validate(user)

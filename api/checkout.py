"""Checkout-initiation router used by the pricing page."""

from fastapi import APIRouter
from core.logger import get_logger
from schemas import CheckoutRequest, CheckoutResponse
from services.checkout_service import start_checkout

logger = get_logger("api.checkout")
router = APIRouter(prefix="/api", tags=["checkout"])


@router.post("/check-out", response_model=CheckoutResponse)
def check_out(payload: CheckoutRequest):
    """Start a hosted checkout session and return its redirect URL.

    Raises:
        CheckoutError: Unknown plan, free plan or processor failure.
        ConfigurationError: Missing API key or price id for the plan.
    """
    logger.info("Checkout requested: user=%s plan=%s", payload.user_id, payload.plan_type)
    return CheckoutResponse(url=start_checkout(payload))

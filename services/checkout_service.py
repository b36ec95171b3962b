"""Checkout initiation: plan validation and processor session creation."""

from typing import Optional
from core import config
from core.exceptions import CheckoutError, ConfigurationError
from core.logger import get_logger
from schemas.checkout_schema import CheckoutRequest
from services.payment_provider import (
    CheckoutSessionParams,
    PaymentProviderClient,
    get_payment_provider_client,
)
from services.plan_catalog import get_plan, is_free

logger = get_logger("services.checkout_service")


def start_checkout(request: CheckoutRequest, provider: Optional[PaymentProviderClient] = None) -> str:
    """Return the hosted checkout URL for a paid plan.

    Raises:
        CheckoutError: Unknown plan (404), free plan (400) or processor failure.
        ConfigurationError: No price id or API key configured for the plan.
    """
    plan_type = request.plan_type.lower()
    if get_plan(plan_type) is None:
        raise CheckoutError(f"Unknown plan '{request.plan_type}'", status_code=404)
    if is_free(plan_type):
        raise CheckoutError("The Free plan does not require checkout", status_code=400)

    price_id = config.checkout_price_id(plan_type)
    if not price_id:
        raise ConfigurationError(
            f"No price configured for plan '{plan_type}'",
            config_key=f"CHECKOUT_PRICE_{plan_type.upper()}",
        )

    provider = provider or get_payment_provider_client()
    url = provider.create_checkout_session(CheckoutSessionParams(
        price_id=price_id,
        user_id=request.user_id,
        email=request.email,
        plan_type=plan_type,
        success_url=config.CHECKOUT_SUCCESS_URL,
        cancel_url=config.CHECKOUT_CANCEL_URL,
    ))
    logger.info("Checkout session created for user=%s plan=%s", request.user_id, plan_type)
    return url


class ServiceCheckoutGateway:
    """In-process gateway for the subscription flow on server-rendered pages.

    Same contract as the HTTP `CheckoutClient`: returns the URL or raises
    `CheckoutError` with a user-facing message.
    """

    def __init__(self, provider: Optional[PaymentProviderClient] = None):
        self.provider = provider

    def initiate(self, user_id: str, plan_type: str, email: str) -> str:
        request = CheckoutRequest(user_id=user_id, plan_type=plan_type, email=email)
        try:
            return start_checkout(request, provider=self.provider)
        except ConfigurationError as exc:
            logger.error("Checkout misconfigured: %s", exc.message)
            raise CheckoutError("Payment processing failed", status_code=500)

"""Payment processor client for hosted checkout sessions.

Talks to a Stripe-compatible REST API: sessions are created with a
form-encoded POST and the hosted page URL is returned to the caller.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from core import config
from core.exceptions import CheckoutError, ConfigurationError
from core.logger import get_logger

logger = get_logger("services.payment_provider")


@dataclass
class CheckoutSessionParams:
    price_id: str
    user_id: str
    email: str
    plan_type: str
    success_url: str
    cancel_url: str

    def to_form(self) -> Dict[str, str]:
        return {
            "mode": "subscription",
            "line_items[0][price]": self.price_id,
            "line_items[0][quantity]": "1",
            "customer_email": self.email,
            "client_reference_id": self.user_id,
            "success_url": self.success_url,
            "cancel_url": self.cancel_url,
            "metadata[planType]": self.plan_type,
            "metadata[userId]": self.user_id,
        }


@dataclass
class PaymentProviderClient:
    """HTTP client wrapper for the checkout sessions API."""

    api_key: str
    base_url: str = config.CHECKOUT_API_BASE
    timeout: float = config.CHECKOUT_TIMEOUT
    transport: Optional[httpx.BaseTransport] = None

    def _request(self, method: str, path: str, *, data: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        url = f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"
        headers = {"Authorization": f"Bearer {self.api_key}"}
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.request(method, url, headers=headers, data=data)
        except httpx.HTTPError as exc:
            logger.error("Payment provider unreachable: %s", exc)
            raise CheckoutError("Payment provider unavailable", status_code=502, details=str(exc))
        if response.status_code >= 400:
            try:
                payload = response.json()
            except ValueError:
                payload = {"body": response.text}
            error = payload.get("error") if isinstance(payload.get("error"), dict) else {}
            message = error.get("message") or payload.get("message") or "Payment processing failed"
            logger.warning("Payment provider error %s: %s", response.status_code, payload)
            raise CheckoutError(message, status_code=502, details=payload)
        return response.json()

    def create_checkout_session(self, params: CheckoutSessionParams) -> str:
        """Create a hosted checkout session and return its URL."""
        logger.info("Creating checkout session user=%s plan=%s", params.user_id, params.plan_type)
        session = self._request("POST", "/v1/checkout/sessions", data=params.to_form())
        url = session.get("url")
        if not url:
            raise CheckoutError("Checkout session did not include a redirect URL", status_code=502)
        return url


def get_payment_provider_client() -> PaymentProviderClient:
    api_key = config.checkout_api_key()
    if not api_key:
        raise ConfigurationError("Payment provider API key is not configured", config_key="CHECKOUT_API_KEY")
    return PaymentProviderClient(api_key=api_key, base_url=config.CHECKOUT_API_BASE)

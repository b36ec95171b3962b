"""HTTP gateway for `POST /api/check-out`."""

from typing import Any, Dict

import httpx

from core.exceptions import CheckoutError
from core.logger import get_logger

logger = get_logger("client.checkout_client")

CHECKOUT_PATH = "/api/check-out"
DEFAULT_FAILURE_MESSAGE = "Payment processing failed"
UNEXPECTED_FAILURE_MESSAGE = "An unexpected error occurred"


class CheckoutClient:
    """Requests a checkout URL from the backend over HTTP.

    Args:
        http: An `httpx.Client` whose base URL points at the app.
    """

    def __init__(self, http: httpx.Client):
        self.http = http

    def initiate(self, user_id: str, plan_type: str, email: str) -> str:
        body = {"userId": user_id, "planType": plan_type, "email": email}
        try:
            response = self.http.post(CHECKOUT_PATH, json=body)
        except httpx.HTTPError as exc:
            logger.error("Checkout request failed: %s", exc)
            raise CheckoutError(UNEXPECTED_FAILURE_MESSAGE, details=str(exc))

        if response.is_error:
            raise CheckoutError(_failure_message(response), status_code=response.status_code)

        try:
            url = response.json().get("url")
        except ValueError:
            url = None
        if not url:
            raise CheckoutError(UNEXPECTED_FAILURE_MESSAGE, status_code=response.status_code)
        return url


def _failure_message(response: httpx.Response) -> str:
    try:
        payload: Dict[str, Any] = response.json()
    except ValueError:
        return DEFAULT_FAILURE_MESSAGE
    if not isinstance(payload, dict):
        return DEFAULT_FAILURE_MESSAGE
    message = payload.get("message") or payload.get("error")
    return message if isinstance(message, str) and message else DEFAULT_FAILURE_MESSAGE

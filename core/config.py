"""Environment-driven application settings.

Values are read once at import time. Tests override them with environment
variables before the application modules are imported.
"""

import os
from typing import Optional

APP_ENV = os.getenv("APP_ENV", "development")

LOG_DIR = os.getenv("LOG_DIR", os.path.join(os.path.dirname(__file__), "..", "logs"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Payment processor (Stripe-compatible checkout sessions API)
CHECKOUT_API_BASE = os.getenv("CHECKOUT_API_BASE", "https://api.stripe.com")
CHECKOUT_SUCCESS_URL = os.getenv("CHECKOUT_SUCCESS_URL", "http://localhost:8000/plan-form")
CHECKOUT_CANCEL_URL = os.getenv("CHECKOUT_CANCEL_URL", "http://localhost:8000/subscription")
CHECKOUT_TIMEOUT = float(os.getenv("CHECKOUT_TIMEOUT", "10"))

SIGN_UP_PATH = "/sign-up"
PLAN_FORM_PATH = "/plan-form"
GENERATE_PLAN_PATH = "/generate-plan"


def is_production() -> bool:
    """Return True when running with APP_ENV=production."""
    return os.getenv("APP_ENV", APP_ENV).lower() == "production"


def checkout_api_key() -> Optional[str]:
    return os.getenv("CHECKOUT_API_KEY")


def checkout_price_id(plan_type: str) -> Optional[str]:
    """Look up the processor price id configured for a plan tier.

    The variable name is ``CHECKOUT_PRICE_<PLAN>``, e.g. ``CHECKOUT_PRICE_PRO``.
    """
    return os.getenv(f"CHECKOUT_PRICE_{plan_type.upper()}")

"""Subscription initiation flow behind the pricing page buttons."""

import enum
from typing import Callable, Optional

from core.config import SIGN_UP_PATH
from core.exceptions import CheckoutError
from core.logger import get_logger
from core.viewer import Viewer
from client.interfaces import CheckoutGateway, Navigator, Notifier
from services.plan_catalog import is_free

logger = get_logger("client.subscription")

NOTICE_ID = "subscribe"
MISSING_USER_MESSAGE = "User information missing"


class SubscriptionOutcome(str, enum.Enum):
    SIGN_UP = "sign_up"
    FREE = "free"
    REDIRECTED = "redirected"
    FAILED = "failed"


class SubscriptionFlow:
    """Decides what a click on a pricing tier does.

    Signed-out viewers go to sign-up, the free tier calls the caller's
    continuation, and paid tiers request one checkout URL and navigate to
    it. `pending` is True while that request is in flight so the caller can
    disable its buttons; the flow does not queue or cancel requests.
    """

    def __init__(
        self,
        viewer: Optional[Viewer],
        gateway: CheckoutGateway,
        navigator: Navigator,
        notifier: Notifier,
    ):
        self.viewer = viewer
        self.gateway = gateway
        self.navigator = navigator
        self.notifier = notifier
        self.pending = False

    def handle_subscribe(
        self,
        plan_type: str,
        on_free_click: Optional[Callable[[], None]] = None,
    ) -> SubscriptionOutcome:
        if self.viewer is None or not self.viewer.is_authenticated:
            self.navigator.push(SIGN_UP_PATH)
            return SubscriptionOutcome.SIGN_UP

        if is_free(plan_type):
            self.notifier.info("You're already on the Free plan!")
            if on_free_click is not None:
                on_free_click()
            return SubscriptionOutcome.FREE

        return self._subscribe(plan_type.lower())

    def _subscribe(self, plan_type: str) -> SubscriptionOutcome:
        self.notifier.loading("Processing your subscription...", id=NOTICE_ID)
        if not self.viewer.email:
            self.notifier.error(MISSING_USER_MESSAGE, id=NOTICE_ID)
            return SubscriptionOutcome.FAILED

        self.pending = True
        try:
            url = self.gateway.initiate(self.viewer.id, plan_type, self.viewer.email)
        except CheckoutError as exc:
            logger.warning("Checkout failed for user=%s plan=%s: %s", self.viewer.id, plan_type, exc.message)
            self.notifier.error(exc.message, id=NOTICE_ID)
            return SubscriptionOutcome.FAILED
        finally:
            self.pending = False

        self.notifier.success("Redirecting to checkout!", id=NOTICE_ID)
        self.navigator.assign(url)
        return SubscriptionOutcome.REDIRECTED

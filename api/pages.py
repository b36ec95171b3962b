"""Server-rendered pages: the meal plan dashboard and the pricing page."""

from typing import Optional
from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from api.dependencies import get_viewer
from client.interfaces import CheckoutGateway, NoticeLog, RecordingNavigator
from client.meal_plan_view import MealPlanView, PlanFetchError
from client.subscription import SubscriptionFlow
from core.config import PLAN_FORM_PATH, SIGN_UP_PATH
from core.exceptions import NotFoundError
from core.logger import get_logger
from core.viewer import Viewer
from database.deps import get_db_read
from schemas.meal_schema import MealPlanData
from services.checkout_service import ServiceCheckoutGateway
from services.meal_plan_service import get_plan_for_user
from services.plan_catalog import PLANS
from views import components

logger = get_logger("api.pages")
router = APIRouter(tags=["pages"])


def get_checkout_gateway() -> CheckoutGateway:
    return ServiceCheckoutGateway()


def local_plan_fetcher(db: Session, user_id: str):
    """Plan fetcher that reads the store directly instead of going over HTTP."""

    def fetch() -> MealPlanData:
        try:
            return get_plan_for_user(db, user_id)
        except NotFoundError:
            raise PlanFetchError.not_found()
        except SQLAlchemyError:
            logger.exception("Plan lookup failed for user %s", user_id)
            raise PlanFetchError.failed()

    return fetch


@router.get("/dashboard", response_class=HTMLResponse)
def dashboard(viewer: Optional[Viewer] = Depends(get_viewer), db: Session = Depends(get_db_read)):
    if viewer is None:
        return RedirectResponse(SIGN_UP_PATH, status_code=303)
    view = MealPlanView(local_plan_fetcher(db, viewer.id))
    view.load()
    return HTMLResponse(components.render_page("Dashboard", view.render()))


@router.get("/subscription", response_class=HTMLResponse)
def subscription_page():
    return HTMLResponse(components.render_page("Subscription", components.render_pricing_grid(PLANS)))


@router.post("/subscription/{plan_type}", response_class=HTMLResponse)
def subscribe(
    plan_type: str,
    viewer: Optional[Viewer] = Depends(get_viewer),
    gateway: CheckoutGateway = Depends(get_checkout_gateway),
):
    """Run the subscription flow for a pricing-card click.

    Navigation targets become 303 redirects; failures re-render the pricing
    grid with the error notice.
    """
    navigator = RecordingNavigator()
    notices = NoticeLog()
    flow = SubscriptionFlow(viewer, gateway, navigator, notices)
    outcome = flow.handle_subscribe(plan_type, on_free_click=lambda: navigator.push(PLAN_FORM_PATH))
    logger.info("Subscription click plan=%s outcome=%s", plan_type, outcome.value)

    if navigator.target:
        return RedirectResponse(navigator.target, status_code=303)
    body = components.render_pricing_grid(PLANS, is_pending=flow.pending, notices=notices.notices)
    return HTMLResponse(components.render_page("Subscription", body))

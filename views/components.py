"""Render functions for the presentational components.

Each function renders one template with the data it is given and holds no
state. Templates live in `views/templates`.
"""

from pathlib import Path
from typing import Any, Iterable, List, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from core.config import GENERATE_PLAN_PATH, PLAN_FORM_PATH
from schemas.meal_schema import Meal, MealPlanData
from schemas.plan_schema import Plan

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

DEFAULT_PRICING_TITLE = "Choose Your Plan"
DEFAULT_PRICING_SUBTITLE = (
    "Unlock the full potential of AI-powered nutrition planning with features "
    "designed for your health journey"
)


def format_number(value: Any) -> Any:
    """Show whole floats without a trailing `.0`; leave other values alone."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _build_environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=select_autoescape(["html"]),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["num"] = format_number
    env.globals["plan_form_path"] = PLAN_FORM_PATH
    env.globals["generate_plan_path"] = GENERATE_PLAN_PATH
    return env


env = _build_environment()


def _render(template: str, **context: Any) -> str:
    return env.get_template(template).render(**context)


def render_meal_card(meal: Meal, meal_type: str) -> str:
    return _render("components/meal_card.html", meal=meal, meal_type=meal_type)


def render_meal_plan_header(plan: MealPlanData) -> str:
    return _render("components/meal_plan_header.html", plan=plan)


def render_user_stats(plan: MealPlanData) -> str:
    return _render("components/user_stats.html", plan=plan)


def render_loading(message: str) -> str:
    return _render("components/loading.html", message=message)


def render_empty_state(
    is_error: bool = False,
    is_not_found: bool = False,
    error_message: Optional[str] = None,
) -> str:
    """Render the empty/error panel of the dashboard.

    Not-found errors link to the plan form; other errors offer a retry that
    reloads the dashboard. Without an error the generic empty state links
    to plan generation.
    """
    return _render(
        "components/empty_state.html",
        is_error=is_error,
        is_not_found=is_not_found,
        error_message=error_message or "",
    )


def render_dashboard(plan: MealPlanData) -> str:
    """Header, stats and one card per meal in the plan's own order."""
    cards: List[str] = [render_meal_card(meal, meal_type) for meal_type, meal in plan.meals.items()]
    return _render(
        "dashboard.html",
        header=render_meal_plan_header(plan),
        stats=render_user_stats(plan),
        cards=cards,
    )


def render_pricing_card(plan: Plan, is_pending: bool = False) -> str:
    return _render("components/pricing_card.html", plan=plan, is_pending=is_pending)


def render_pricing_grid(
    plans: Iterable[Plan],
    is_pending: bool = False,
    title: str = DEFAULT_PRICING_TITLE,
    subtitle: str = DEFAULT_PRICING_SUBTITLE,
    notices: Iterable[Any] = (),
) -> str:
    cards = [render_pricing_card(plan, is_pending) for plan in plans]
    return _render(
        "components/pricing_grid.html",
        cards=cards,
        title=title,
        subtitle=subtitle,
        notices=list(notices),
    )


def render_page(title: str, body: str) -> str:
    """Wrap a rendered fragment in the HTML page layout."""
    return _render("layout.html", title=title, body=body)

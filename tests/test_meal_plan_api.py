"""Tests for `GET /api/get-plan`."""

from core.repository import MealPlanRepository, UserRepository
from factories import make_plan_payload

VIEWER = {"X-User-Id": "user_1", "X-User-Email": "jane@example.com"}


def seed_user_with_plan(db, payload=None):
    UserRepository(db).upsert_by_email("user_1", "jane@example.com", "Jane")
    return MealPlanRepository(db).save_meal_plan("user_1", payload or make_plan_payload())


def test_requires_viewer(client):
    res = client.get("/api/get-plan")
    assert res.status_code == 401


def test_missing_plan_is_404(client, db):
    UserRepository(db).upsert_by_email("user_1", "jane@example.com", "Jane")
    res = client.get("/api/get-plan", headers=VIEWER)
    assert res.status_code == 404
    assert res.json()["error"] == "No meal plan found"


def test_returns_plan_with_camel_case_keys(client, db):
    seed_user_with_plan(db)
    res = client.get("/api/get-plan", headers=VIEWER)
    assert res.status_code == 200
    body = res.json()
    assert body["currentWeight"] == 78.5
    assert body["bodyFat"] == 18
    assert body["muscleMass"] == 36.2
    assert list(body["meals"]) == ["breakfast", "lunch", "dinner", "snack"]
    assert body["meals"]["lunch"]["ingredients"] == ["Chicken Salad ingredient 1", "Chicken Salad ingredient 2"]


def test_newest_plan_wins(client, db):
    seed_user_with_plan(db)
    newer = make_plan_payload()
    newer["goal"] = "Cut"
    MealPlanRepository(db).save_meal_plan("user_1", newer)
    res = client.get("/api/get-plan", headers=VIEWER)
    assert res.json()["goal"] == "Cut"

"""Tests for the Clerk account webhook."""

import asyncio
from datetime import timezone

import pytest
from sqlalchemy.exc import OperationalError

from core.repository import UserRepository
from database import models
from database.database import WriteSessionLocal


def clerk_event(user_id="user_1", email="jane@example.com", full_name="Jane Doe", primary_id="idn_1", extra_emails=()):
    addresses = [{"id": "idn_1", "email_address": email}]
    addresses.extend(extra_emails)
    data = {
        "id": user_id,
        "full_name": full_name,
        "email_addresses": addresses,
        "primary_email_address_id": primary_id,
    }
    return {"type": "user.created", "data": data}


def user_count(db):
    return db.query(models.User).count()


def test_creates_user_with_provider_id(client, db):
    res = client.post("/api/webhook/clerk", json=clerk_event())
    assert res.status_code == 200
    body = res.json()
    assert body["id"] == "user_1"
    assert body["email"] == "jane@example.com"
    assert body["name"] == "Jane Doe"
    assert user_count(db) == 1


@pytest.mark.parametrize("payload", [None, {}, {"data": None}, {"type": "user.created"}])
def test_missing_data_returns_400_without_writes(client, db, payload):
    if payload is None:
        res = client.post("/api/webhook/clerk")
    else:
        res = client.post("/api/webhook/clerk", json=payload)
    assert res.status_code == 400
    assert res.json()["error"] == "Missing required data"
    assert user_count(db) == 0


def test_invalid_json_is_treated_as_missing_data(client, db):
    res = client.post("/api/webhook/clerk", content=b"{not json", headers={"Content-Type": "application/json"})
    assert res.status_code == 400
    assert res.json()["error"] == "Missing required data"
    assert user_count(db) == 0


def test_missing_user_id_returns_400(client, db):
    event = clerk_event()
    del event["data"]["id"]
    res = client.post("/api/webhook/clerk", json=event)
    assert res.status_code == 400
    assert res.json()["error"] == "User ID not found"
    assert user_count(db) == 0


def test_empty_email_list_returns_400(client, db):
    event = clerk_event()
    event["data"]["email_addresses"] = []
    res = client.post("/api/webhook/clerk", json=event)
    assert res.status_code == 400
    assert res.json()["error"] == "User email not found"
    assert user_count(db) == 0


def test_primary_email_is_preferred(client):
    event = clerk_event(
        email="first@example.com",
        primary_id="idn_2",
        extra_emails=[{"id": "idn_2", "email_address": "primary@example.com"}],
    )
    res = client.post("/api/webhook/clerk", json=event)
    assert res.status_code == 200
    assert res.json()["email"] == "primary@example.com"


def test_unknown_primary_id_falls_back_to_first_email(client):
    event = clerk_event(
        email="first@example.com",
        primary_id="idn_missing",
        extra_emails=[{"id": "idn_2", "email_address": "second@example.com"}],
    )
    res = client.post("/api/webhook/clerk", json=event)
    assert res.status_code == 200
    assert res.json()["email"] == "first@example.com"


def test_missing_full_name_stores_empty_name(client):
    event = clerk_event()
    del event["data"]["full_name"]
    res = client.post("/api/webhook/clerk", json=event)
    assert res.status_code == 200
    assert res.json()["name"] == ""


def test_repeated_event_is_idempotent(client, db):
    first = client.post("/api/webhook/clerk", json=clerk_event()).json()
    second = client.post("/api/webhook/clerk", json=clerk_event()).json()
    assert user_count(db) == 1
    assert first["id"] == second["id"]
    assert first["email"] == second["email"]
    assert first["name"] == second["name"]
    assert first["created_at"] == second["created_at"]


def test_update_changes_only_the_name(client, db):
    client.post("/api/webhook/clerk", json=clerk_event(full_name="Jane Doe"))
    res = client.post("/api/webhook/clerk", json=clerk_event(full_name="Jane Smith"))
    assert res.status_code == 200
    assert res.json()["name"] == "Jane Smith"
    stored = UserRepository(db).get_by_email("jane@example.com")
    assert stored.id == "user_1"
    assert stored.name == "Jane Smith"


def test_new_provider_id_for_existing_email_keeps_original_id(client, db):
    client.post("/api/webhook/clerk", json=clerk_event(user_id="user_old"))
    res = client.post("/api/webhook/clerk", json=clerk_event(user_id="user_new", full_name="Renamed"))
    assert res.status_code == 200
    assert res.json()["id"] == "user_old"
    assert res.json()["name"] == "Renamed"
    assert user_count(db) == 1
    assert db.get(models.User, "user_new") is None


def _failing_upsert(self, user_id, email, name):
    raise OperationalError("INSERT INTO users", {}, Exception("disk I/O error"))


def test_persistence_failure_returns_500_with_details_outside_production(client, monkeypatch):
    monkeypatch.setattr(UserRepository, "upsert_by_email", _failing_upsert)
    res = client.post("/api/webhook/clerk", json=clerk_event())
    assert res.status_code == 500
    body = res.json()
    assert body["error"] == "Internal server error"
    assert "disk I/O error" in body["details"]


def test_persistence_failure_hides_details_in_production(client, monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setattr(UserRepository, "upsert_by_email", _failing_upsert)
    res = client.post("/api/webhook/clerk", json=clerk_event())
    assert res.status_code == 500
    assert res.json() == {"error": "Internal server error"}


def test_null_email_list_returns_400(client, db):
    event = clerk_event()
    event["data"]["email_addresses"] = None
    res = client.post("/api/webhook/clerk", json=event)
    assert res.status_code == 400
    assert res.json()["error"] == "User email not found"
    assert user_count(db) == 0


def test_empty_primary_address_falls_back_to_first_email(client):
    event = clerk_event(
        email="first@example.com",
        primary_id="idn_2",
        extra_emails=[{"id": "idn_2", "email_address": ""}],
    )
    res = client.post("/api/webhook/clerk", json=event)
    assert res.status_code == 200
    assert res.json()["email"] == "first@example.com"


def _commit_competing_user(user_id, email, name):
    other = WriteSessionLocal()
    try:
        other.add(models.User(id=user_id, email=email, name=name))
        other.commit()
    finally:
        other.close()


def test_concurrent_event_for_same_email_is_last_write_wins(client, db, monkeypatch):
    original_upsert = UserRepository.upsert_by_email

    def upsert_after_competing_insert(self, user_id, email, name):
        # another webhook delivery commits the same email first
        _commit_competing_user("user_racer", email, "Racer")
        return original_upsert(self, user_id, email, name)

    monkeypatch.setattr(UserRepository, "upsert_by_email", upsert_after_competing_insert)
    res = client.post("/api/webhook/clerk", json=clerk_event(user_id="user_1", full_name="Jane Doe"))

    assert res.status_code == 200
    assert res.json()["id"] == "user_racer"
    assert res.json()["name"] == "Jane Doe"
    assert user_count(db) == 1


def test_upsert_after_row_appears_in_other_session(db):
    repo = UserRepository(db)
    assert repo.get_by_email("jane@example.com") is None
    _commit_competing_user("user_racer", "jane@example.com", "Racer")

    user = repo.upsert_by_email("user_1", "jane@example.com", "Jane Doe")

    assert user.id == "user_racer"
    assert user.name == "Jane Doe"
    assert user_count(db) == 1


def test_timestamps_are_timezone_aware_utc():
    assert models.utcnow().tzinfo is timezone.utc


def test_account_sync_runs_off_the_event_loop(client, monkeypatch):
    from services.account_service import account_service

    loops = []
    original_sync = account_service.sync_user

    def recording_sync(db, data):
        try:
            asyncio.get_running_loop()
            loops.append("event loop")
        except RuntimeError:
            loops.append("worker thread")
        return original_sync(db, data)

    monkeypatch.setattr(account_service, "sync_user", recording_sync)
    res = client.post("/api/webhook/clerk", json=clerk_event())
    assert res.status_code == 200
    assert loops == ["worker thread"]

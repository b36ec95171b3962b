"""Shared fixtures: an isolated SQLite database and an app test client."""

import os
import tempfile

_TMP_DIR = tempfile.mkdtemp(prefix="nutriplan-tests-")
os.environ.setdefault("WRITE_DATABASE_URL", f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}")
os.environ.setdefault("LOG_DIR", os.path.join(_TMP_DIR, "logs"))
os.environ.setdefault("APP_ENV", "development")

import pytest
from fastapi.testclient import TestClient

from database import init_db, models
from database.database import WriteSessionLocal


@pytest.fixture(autouse=True)
def clean_db():
    """Create the schema and empty every table before each test."""
    init_db()
    session = WriteSessionLocal()
    try:
        session.query(models.MealPlan).delete()
        session.query(models.User).delete()
        session.commit()
    finally:
        session.close()
    yield


@pytest.fixture()
def db():
    session = WriteSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client():
    from main import app

    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()

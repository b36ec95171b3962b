"""SQLAlchemy ORM models for the meal-plan dashboard.

This module defines the database schema models used throughout the
application: User and MealPlan. Models are plain declarative classes and
carry no business logic.
"""

from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey, Text
from sqlalchemy.orm import declarative_base
from datetime import datetime, timezone

Base = declarative_base()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    """ORM model representing an application user.

    The primary key is the identity provider's user id and is only set on
    creation. Email is the reconciliation key used by the account webhook.
    """

    __tablename__ = "users"
    id = Column(String, primary_key=True)
    email = Column(String, unique=True, nullable=False, index=True)
    name = Column(String, nullable=False, default="")
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)


class MealPlan(Base):
    """ORM model storing a generated meal plan snapshot for a user.

    Meals are stored as a JSON-encoded object keyed by meal name
    (breakfast, lunch, dinner, snack) in insertion order.
    """

    __tablename__ = "meal_plans"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, ForeignKey('users.id'), nullable=False, index=True)
    calories = Column(Float, nullable=False)
    protein = Column(Float, nullable=False)
    carbs = Column(Float, nullable=False)
    fat = Column(Float, nullable=False)
    current_weight = Column(Float, nullable=False)
    body_fat = Column(Float, nullable=False)
    muscle_mass = Column(Float, nullable=False)
    goal = Column(String, nullable=False)
    meals = Column(Text, nullable=False)
    created_at = Column(DateTime, default=utcnow)

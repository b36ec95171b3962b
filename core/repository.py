"""Repository classes for database operations.

`BaseRepository` holds the add/commit/refresh boilerplate; the concrete
repositories add the lookups used by the webhook and the plan endpoints.
"""

import json
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import TypeVar, Generic, Type, Optional, Any, Dict
from database.models import Base, User, MealPlan, utcnow

T = TypeVar('T', bound=Base)

_DIALECT_INSERTS = {"sqlite": sqlite_insert, "postgresql": postgresql_insert}


class BaseRepository(Generic[T]):
    """Generic repository for common database operations.

    Attributes:
        model: SQLAlchemy model class to operate on.
        session: Database session for executing queries.
    """

    model: Type[T]

    def __init__(self, session: Session):
        self.session = session

    def create(self, obj: T) -> T:
        """Add, commit and refresh a new object."""
        self.session.add(obj)
        self.session.commit()
        self.session.refresh(obj)
        return obj

    def get_by_id(self, id: Any) -> Optional[T]:
        """Retrieve an object by its primary key, or None."""
        return self.session.get(self.model, id)

    def update(self, obj: T) -> T:
        """Commit pending changes on `obj` and refresh it."""
        self.session.commit()
        self.session.refresh(obj)
        return obj

    def count(self) -> int:
        return self.session.query(self.model).count()


class UserRepository(BaseRepository[User]):
    """Users keyed for reconciliation by email."""

    model = User

    def get_by_email(self, email: str) -> Optional[User]:
        return self.session.query(User).filter(User.email == email).first()

    def upsert_by_email(self, user_id: str, email: str, name: str) -> User:
        """Create the user for `email`, or update its display name.

        Runs as a single INSERT ... ON CONFLICT (email) DO UPDATE, so
        concurrent events for one email resolve last-write-wins in the
        database. The primary key is only written on creation: a different
        `user_id` for an existing email is ignored and the stored id is kept.
        """
        insert = _DIALECT_INSERTS.get(self.session.get_bind().dialect.name)
        if insert is None:
            return self._upsert_with_retry(user_id, email, name)

        now = utcnow()
        stmt = insert(User).values(id=user_id, email=email, name=name, created_at=now, updated_at=now)
        stmt = stmt.on_conflict_do_update(
            index_elements=[User.email],
            set_={"name": stmt.excluded.name, "updated_at": stmt.excluded.updated_at},
        )
        self.session.execute(stmt)
        self.session.commit()
        return self.get_by_email(email)

    def _upsert_with_retry(self, user_id: str, email: str, name: str) -> User:
        # Dialects without ON CONFLICT: a lost insert race re-reads and updates.
        user = self.get_by_email(email)
        if user is None:
            try:
                return self.create(User(id=user_id, email=email, name=name))
            except IntegrityError:
                self.session.rollback()
                user = self.get_by_email(email)
                if user is None:
                    raise
        user.name = name
        return self.update(user)


class MealPlanRepository(BaseRepository[MealPlan]):
    """Meal plan snapshots; the newest row per user is the current plan."""

    model = MealPlan

    def latest_for_user(self, user_id: str) -> Optional[MealPlan]:
        return (
            self.session.query(MealPlan)
            .filter(MealPlan.user_id == user_id)
            .order_by(MealPlan.created_at.desc(), MealPlan.id.desc())
            .first()
        )

    def save_meal_plan(self, user_id: str, data: Dict[str, Any]) -> MealPlan:
        """Persist a plan snapshot given as a camelCase `MealPlanData` dict."""
        plan = MealPlan(
            user_id=user_id,
            calories=data["calories"],
            protein=data["protein"],
            carbs=data["carbs"],
            fat=data["fat"],
            current_weight=data["currentWeight"],
            body_fat=data["bodyFat"],
            muscle_mass=data["muscleMass"],
            goal=data["goal"],
            meals=json.dumps(data["meals"]),
        )
        return self.create(plan)

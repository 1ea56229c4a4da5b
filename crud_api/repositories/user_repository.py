"""Persistence gateway for User rows backed by SQLAlchemy."""
from __future__ import annotations

from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Iterator, Mapping, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

from crud_api.db.models import User
from crud_api.db.session import Database
from crud_api.domain.users import PATCHABLE_FIELDS, UserFilters

from .errors import ConstraintViolation, StoreUnavailable


@contextmanager
def _store_errors() -> Iterator[None]:
    try:
        yield
    except IntegrityError as exc:
        raise ConstraintViolation(str(exc.orig)) from exc
    except (OperationalError, InterfaceError) as exc:
        raise StoreUnavailable(str(exc.orig)) from exc
    except PoolTimeoutError as exc:
        raise StoreUnavailable(str(exc)) from exc


class UserRepository:
    """CRUD helpers wrapping the SQLAlchemy session for the users table."""

    def __init__(self, database: Database) -> None:
        self.database = database

    def create(self, name: str, email: str, age: int | None = None) -> User:
        now = datetime.now(timezone.utc)
        entity = User(name=name, email=email, age=age, created_at=now, updated_at=now)
        with _store_errors(), self.database.session() as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return entity

    def find_by_id(self, user_id: str) -> Optional[User]:
        with _store_errors(), self.database.session() as session:
            return session.get(User, user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        with _store_errors(), self.database.session() as session:
            stmt = select(User).where(User.email == email)
            return session.execute(stmt).scalar_one_or_none()

    def find_all(self, filters: UserFilters | None = None) -> list[User]:
        stmt = select(User)
        if filters is not None and not filters.is_empty():
            if filters.name:
                stmt = stmt.where(User.name.icontains(filters.name, autoescape=True))
            if filters.email:
                stmt = stmt.where(User.email.icontains(filters.email, autoescape=True))
            if filters.age is not None:
                stmt = stmt.where(User.age == filters.age)
        stmt = stmt.order_by(User.created_at.desc(), User.id)
        with _store_errors(), self.database.session() as session:
            return list(session.execute(stmt).scalars().all())

    def update(self, user_id: str, changes: Mapping[str, Any]) -> Optional[User]:
        with _store_errors(), self.database.session() as session:
            user = session.get(User, user_id)
            if not user:
                return None
            for field in PATCHABLE_FIELDS:
                if field in changes:
                    setattr(user, field, changes[field])
            user.updated_at = datetime.now(timezone.utc)
            session.commit()
            session.refresh(user)
            return user

    def delete(self, user_id: str) -> bool:
        with _store_errors(), self.database.session() as session:
            result = session.execute(delete(User).where(User.id == user_id))
            session.commit()
            return (result.rowcount or 0) > 0

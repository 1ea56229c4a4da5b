"""User use cases (create, list, lookup, patch, delete)."""

from __future__ import annotations

import logging
from typing import Optional

from crud_api.db.models import User
from crud_api.domain.users import UserCreate, UserFilters, UserUpdate
from crud_api.repositories import ConstraintViolation, UserRepository

logger = logging.getLogger(__name__)


class UserError(Exception):
    """Base exception for the user workflow."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DuplicateEmailError(UserError):
    """Raised when the e-mail already belongs to another user."""

    def __init__(self, email: str):
        super().__init__("User with this email already exists")
        self.email = email


class UserService:
    """Orchestrates the user repository; lookups return None instead of raising."""

    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository

    def create_user(self, data: UserCreate) -> User:
        if self.repository.find_by_email(data.email):
            raise DuplicateEmailError(data.email)
        try:
            user = self.repository.create(data.name, data.email, data.age)
        except ConstraintViolation as exc:
            # Lost a race against a concurrent create with the same e-mail.
            raise DuplicateEmailError(data.email) from exc
        logger.info("Created user %s", user.id)
        return user

    def list_users(self, filters: UserFilters | None = None) -> list[User]:
        return self.repository.find_all(filters)

    def get_user(self, user_id: str) -> Optional[User]:
        return self.repository.find_by_id(user_id)

    def update_user(self, user_id: str, patch: UserUpdate) -> Optional[User]:
        if not self.repository.find_by_id(user_id):
            return None
        changes = patch.changes()
        email = changes.get("email")
        if email is not None:
            owner = self.repository.find_by_email(email)
            if owner and owner.id != user_id:
                raise DuplicateEmailError(email)
        try:
            user = self.repository.update(user_id, changes)
        except ConstraintViolation as exc:
            raise DuplicateEmailError(email or "") from exc
        if user:
            logger.info("Updated user %s (%s)", user.id, ", ".join(sorted(changes)) or "no fields")
        return user

    def delete_user(self, user_id: str) -> bool:
        deleted = self.repository.delete(user_id)
        if deleted:
            logger.info("Deleted user %s", user_id)
        return deleted

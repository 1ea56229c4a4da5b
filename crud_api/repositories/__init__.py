"""
Persistence adapters.

Services depend on these gateways instead of opening ORM sessions themselves.
"""

from .errors import ConstraintViolation, RepositoryError, StoreUnavailable
from .user_repository import UserRepository

__all__ = ["ConstraintViolation", "RepositoryError", "StoreUnavailable", "UserRepository"]

"""Request/response shapes for the User entity."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

NAME_MAX_LENGTH = 255
EMAIL_MAX_LENGTH = 255
AGE_MAX = 2_147_483_647  # int4 column

# Fields a PUT body may change; id and timestamps belong to the store.
PATCHABLE_FIELDS = ("name", "email", "age")


class UserCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    email: str = Field(..., min_length=1, max_length=EMAIL_MAX_LENGTH)
    age: Optional[int] = Field(None, ge=0, le=AGE_MAX)


class UserUpdate(BaseModel):
    """Partial update: only the fields present in the body are applied."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: Optional[str] = Field(None, min_length=1, max_length=NAME_MAX_LENGTH)
    email: Optional[str] = Field(None, min_length=1, max_length=EMAIL_MAX_LENGTH)
    age: Optional[int] = Field(None, ge=0, le=AGE_MAX)

    @field_validator("name", "email")
    @classmethod
    def _not_null(cls, value: Optional[str]) -> str:
        if value is None:
            raise ValueError("must not be null")
        return value

    def changes(self) -> dict[str, Any]:
        """Return {field: value} for every field explicitly sent by the client."""
        supplied = self.model_fields_set
        return {field: getattr(self, field) for field in PATCHABLE_FIELDS if field in supplied}


class UserRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    age: Optional[int] = None
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class UserFilters:
    """Listing filters; every field is optional and all supplied ones are ANDed."""

    name: Optional[str] = None
    email: Optional[str] = None
    age: Optional[int] = None

    @classmethod
    def from_query(cls, name: str | None, email: str | None, age: str | None) -> "UserFilters":
        """Build filters from raw query values; blank text and a non-numeric age are dropped."""
        return cls(
            name=(name or "").strip() or None,
            email=(email or "").strip() or None,
            age=parse_age(age),
        )

    def is_empty(self) -> bool:
        return self.name is None and self.email is None and self.age is None


def parse_age(value: str | None) -> Optional[int]:
    if value is None:
        return None
    try:
        age = int(value.strip())
    except ValueError:
        return None
    if not 0 <= age <= AGE_MAX:
        return None
    return age

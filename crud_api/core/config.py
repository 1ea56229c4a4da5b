"""
Configuration helpers for the user CRUD backend.

Routers, services and the store handle receive a Settings instance instead of
reading os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os

from sqlalchemy.engine import URL


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    port: int
    log_level: str
    db_host: str
    db_port: int
    db_username: str
    db_password: str
    db_database: str
    db_synchronize: bool
    db_logging: bool
    database_url: str
    cors_origins: tuple[str, ...]

    def sqlalchemy_url(self) -> str | URL:
        """DATABASE_URL wins; otherwise build a PostgreSQL URL from the DB_* parts."""
        if self.database_url:
            return self.database_url
        return URL.create(
            "postgresql+psycopg",
            username=self.db_username,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_database,
        )


def _int(value: str | None, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _csv(value: str | None, default: tuple[str, ...] = ()) -> tuple[str, ...]:
    if value is None:
        return default
    return tuple(item.strip() for item in value.split(",") if item.strip())


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        port=_int(os.getenv("PORT", "3000"), 3000),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        db_host=os.getenv("DB_HOST", "localhost"),
        db_port=_int(os.getenv("DB_PORT", "5432"), 5432),
        db_username=os.getenv("DB_USERNAME", "postgres"),
        db_password=os.getenv("DB_PASSWORD", "password"),
        db_database=os.getenv("DB_DATABASE", "crud_backend"),
        db_synchronize=_bool(os.getenv("DB_SYNCHRONIZE"), False),
        db_logging=_bool(os.getenv("DB_LOGGING"), False),
        database_url=(os.getenv("DATABASE_URL") or "").strip(),
        cors_origins=_csv(os.getenv("CORS_ORIGINS"), ("*",)),
    )

from __future__ import annotations

import pytest

from crud_api.core import config as core_config

DB_VARS = (
    "APP_ENV",
    "PORT",
    "LOG_LEVEL",
    "DB_HOST",
    "DB_PORT",
    "DB_USERNAME",
    "DB_PASSWORD",
    "DB_DATABASE",
    "DB_SYNCHRONIZE",
    "DB_LOGGING",
    "DATABASE_URL",
    "CORS_ORIGINS",
)


@pytest.fixture()
def clean_env(monkeypatch):
    for name in DB_VARS:
        monkeypatch.delenv(name, raising=False)
    core_config.get_settings.cache_clear()
    yield monkeypatch
    core_config.get_settings.cache_clear()


def test_defaults(clean_env):
    settings = core_config.get_settings()

    assert settings.app_env == "dev"
    assert settings.port == 3000
    assert settings.db_host == "localhost"
    assert settings.db_port == 5432
    assert settings.db_username == "postgres"
    assert settings.db_database == "crud_backend"
    assert settings.db_synchronize is False
    assert settings.db_logging is False
    assert settings.cors_origins == ("*",)

    url = settings.sqlalchemy_url()
    assert url.drivername == "postgresql+psycopg"
    assert url.host == "localhost"
    assert url.port == 5432
    assert url.database == "crud_backend"


def test_env_overrides(clean_env):
    clean_env.setenv("DB_HOST", "db.internal")
    clean_env.setenv("DB_PORT", "6543")
    clean_env.setenv("DB_SYNCHRONIZE", "true")
    clean_env.setenv("DB_LOGGING", "1")
    clean_env.setenv("PORT", "not-a-number")
    clean_env.setenv("CORS_ORIGINS", "http://a.test, http://b.test ,")

    settings = core_config.get_settings()

    assert settings.db_host == "db.internal"
    assert settings.db_port == 6543
    assert settings.db_synchronize is True
    assert settings.db_logging is True
    assert settings.port == 3000
    assert settings.cors_origins == ("http://a.test", "http://b.test")


def test_database_url_wins_over_parts(clean_env):
    clean_env.setenv("DATABASE_URL", "sqlite:///./local.db")
    clean_env.setenv("DB_HOST", "ignored")

    assert core_config.get_settings().sqlalchemy_url() == "sqlite:///./local.db"

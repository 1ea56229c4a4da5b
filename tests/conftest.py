"""
pytest fixtures: a temporary SQLite store per test plus an app/client wired to it.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Make the package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from crud_api.app import create_app  # noqa: E402
from crud_api.core import config as core_config  # noqa: E402
from crud_api.db.session import Database  # noqa: E402
from crud_api.repositories import UserRepository  # noqa: E402
from crud_api.services.user_service import UserService  # noqa: E402


@pytest.fixture()
def settings(tmp_path, monkeypatch):
    """Settings pointing at a temporary SQLite file; caches are reset around the test."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    monkeypatch.setenv("DB_SYNCHRONIZE", "true")
    monkeypatch.setenv("APP_ENV", "test")
    core_config.get_settings.cache_clear()
    yield core_config.get_settings()
    core_config.get_settings.cache_clear()


@pytest.fixture()
def database(settings):
    db = Database.from_settings(settings)
    db.drop_all()
    db.create_all()

    yield db

    try:
        db.drop_all()
    finally:
        db.dispose()


@pytest.fixture()
def repo(database):
    return UserRepository(database)


@pytest.fixture()
def service(repo):
    return UserService(repo)


@pytest.fixture()
def client(settings, database):
    app = create_app(settings, database)
    with TestClient(app) as test_client:
        yield test_client

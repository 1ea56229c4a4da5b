from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from crud_api import __version__
from crud_api.core.config import Settings, get_settings
from crud_api.core.errors import register_exception_handlers
from crud_api.core.logging import configure_logging
from crud_api.core.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware
from crud_api.db.session import Database
from crud_api.repositories import UserRepository
from crud_api.routers import system as system_router
from crud_api.routers import users as users_router
from crud_api.services.user_service import UserService

logger = logging.getLogger(__name__)


def connect_store(database: Database, settings: Settings) -> None:
    """Check the store before serving traffic; a failure terminates the process."""
    try:
        database.ping()
        if settings.db_synchronize:
            database.create_all()
    except SQLAlchemyError as exc:
        logger.critical("Database connection failed: %s", exc)
        raise SystemExit(1) from exc
    logger.info("Database connection established successfully")


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    """Factory compatible with uvicorn --factory."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    database = database or Database.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        connect_store(database, settings)
        yield
        database.dispose()

    app = FastAPI(title="User CRUD API", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.database = database
    app.state.user_service = UserService(UserRepository(database))

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.cors_origins),
            allow_credentials="*" not in settings.cors_origins,
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )
    app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.app_env == "prod")
    app.add_middleware(RequestLoggingMiddleware)
    register_exception_handlers(app)

    app.include_router(system_router.router)
    app.include_router(users_router.router)
    return app

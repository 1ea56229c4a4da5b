from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from crud_api import __version__

router = APIRouter(tags=["system"])
logger = logging.getLogger(__name__)

ENDPOINTS = {
    "health": "GET /health",
    "create_user": "POST /api/users",
    "list_users": "GET /api/users?name=&email=&age=",
    "get_user": "GET /api/users/{id}",
    "update_user": "PUT /api/users/{id}",
    "delete_user": "DELETE /api/users/{id}",
}


@router.get("/")
def root():
    return {"message": "User CRUD API", "version": __version__, "endpoints": ENDPOINTS}


@router.get("/health")
def health(request: Request):
    """Liveness probe; also reports whether the store answers a trivial query."""
    payload = {"status": "OK", "timestamp": datetime.now(timezone.utc).isoformat(), "database": "connected"}
    try:
        request.app.state.database.ping()
    except SQLAlchemyError as exc:
        logger.warning("Health check failed: %s", exc)
        payload.update(status="ERROR", database="unavailable")
        return JSONResponse(payload, status_code=503)
    return payload

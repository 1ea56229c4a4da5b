from __future__ import annotations

import logging

from fastapi import APIRouter, Request, Response

from crud_api.core.errors import INTERNAL_ERROR_MESSAGE, error_response
from crud_api.domain.users import UserCreate, UserFilters, UserRead, UserUpdate
from crud_api.services.user_service import DuplicateEmailError, UserService

router = APIRouter(prefix="/api/users", tags=["users"])
logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "User not found"


def _get_user_service(request: Request) -> UserService:
    svc = getattr(getattr(request.app, "state", None), "user_service", None)
    if not svc:
        raise RuntimeError("UserService not configured")
    return svc


def _internal_error(action: str) -> Response:
    logger.exception("Error %s", action)
    return error_response(500, INTERNAL_ERROR_MESSAGE)


@router.post("", status_code=201, response_model=UserRead)
def create_user(payload: UserCreate, request: Request):
    svc = _get_user_service(request)
    try:
        return svc.create_user(payload)
    except DuplicateEmailError as exc:
        return error_response(400, exc.message)
    except Exception:
        return _internal_error("creating user")


@router.get("", response_model=list[UserRead])
def list_users(
    request: Request,
    name: str | None = None,
    email: str | None = None,
    age: str | None = None,
):
    filters = UserFilters.from_query(name, email, age)
    if age is not None and filters.age is None:
        logger.debug("Ignoring non-numeric age filter %r", age)
    svc = _get_user_service(request)
    try:
        return svc.list_users(filters)
    except Exception:
        return _internal_error("fetching users")


@router.get("/{user_id}", response_model=UserRead)
def get_user(user_id: str, request: Request):
    svc = _get_user_service(request)
    try:
        user = svc.get_user(user_id)
    except Exception:
        return _internal_error("fetching user")
    if not user:
        return error_response(404, NOT_FOUND_MESSAGE)
    return user


@router.put("/{user_id}", response_model=UserRead)
def update_user(user_id: str, payload: UserUpdate, request: Request):
    svc = _get_user_service(request)
    try:
        user = svc.update_user(user_id, payload)
    except DuplicateEmailError as exc:
        return error_response(400, exc.message)
    except Exception:
        return _internal_error("updating user")
    if not user:
        return error_response(404, NOT_FOUND_MESSAGE)
    return user


@router.delete("/{user_id}", status_code=204, response_class=Response)
def delete_user(user_id: str, request: Request):
    svc = _get_user_service(request)
    try:
        deleted = svc.delete_user(user_id)
    except Exception:
        return _internal_error("deleting user")
    if not deleted:
        return error_response(404, NOT_FOUND_MESSAGE)
    return Response(status_code=204)

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, HTTPException, Request

from users_api.repositories.json_storage import StorageError
from users_api.services.user_service import (
    InvalidInputError,
    UserNotFoundError,
    UserService,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])

NOT_FOUND = "User not found."


def _get_user_service(request: Request) -> UserService:
    svc = getattr(getattr(request.app, "state", None), "user_service", None)
    if not svc:
        raise RuntimeError("UserService not configured")
    return svc


def _server_error(exc: StorageError, message: str) -> HTTPException:
    logger.exception("storage failure: %s", exc)
    return HTTPException(500, message)


@router.get("")
def list_users(request: Request):
    svc = _get_user_service(request)
    try:
        return svc.list_users()
    except StorageError as exc:
        raise _server_error(exc, "Failed to read users.")


@router.post("", status_code=201)
def create_user(request: Request, payload: Any = Body(None)):
    svc = _get_user_service(request)
    try:
        return svc.create_user(payload)
    except InvalidInputError as exc:
        raise HTTPException(400, exc.message)
    except StorageError as exc:
        raise _server_error(exc, "Failed to save user.")


@router.get("/search")
def search_users(request: Request, name: str | None = None):
    svc = _get_user_service(request)
    try:
        return svc.search_users(name)
    except InvalidInputError as exc:
        raise HTTPException(400, exc.message)
    except StorageError as exc:
        raise _server_error(exc, "Failed to search users.")


@router.put("/{user_id}")
def update_user(user_id: str, request: Request, payload: Any = Body(None)):
    svc = _get_user_service(request)
    if payload is None:
        payload = {}
    try:
        return svc.update_user(user_id, payload)
    except InvalidInputError as exc:
        raise HTTPException(400, exc.message)
    except UserNotFoundError:
        raise HTTPException(404, NOT_FOUND)
    except StorageError as exc:
        raise _server_error(exc, "Failed to update user.")


@router.delete("/{user_id}")
def delete_user(user_id: str, request: Request):
    svc = _get_user_service(request)
    try:
        svc.delete_user(user_id)
    except InvalidInputError as exc:
        raise HTTPException(400, exc.message)
    except UserNotFoundError:
        raise HTTPException(404, NOT_FOUND)
    except StorageError as exc:
        raise _server_error(exc, "Failed to delete user.")
    return {"message": "User deleted successfully."}

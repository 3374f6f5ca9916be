"""Application factory for the users API."""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from users_api.core.config import Settings, get_settings
from users_api.core.logging import configure_logging
from users_api.core.middleware import RequestLoggingMiddleware
from users_api.repositories.json_storage import JsonUserStorage
from users_api.routers import users as users_router
from users_api.services.user_service import UserService

logger = logging.getLogger(__name__)

INVALID_BODY = "Request body must be valid JSON."


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        {"error": exc.detail},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse({"error": INVALID_BODY}, status_code=400)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI app bound to the configured users file."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Users API")
    app.state.settings = settings
    app.state.user_service = UserService(JsonUserStorage(settings.users_file))

    app.add_middleware(RequestLoggingMiddleware)
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.include_router(users_router.router)

    logger.debug("users file: %s", settings.users_file)
    return app


app = create_app()

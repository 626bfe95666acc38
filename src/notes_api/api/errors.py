"""
notes_api.api.errors

Exception handlers rendering failures as `{"error": {"code", "message"}}`.

Responsibilities:
- Map `ApiError` subclasses to their HTTP status and code.
- Turn storage failures and unexpected exceptions into INTERNAL_ERROR.
- Keep exception text out of responses in prod (it is always logged).
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.status import HTTP_401_UNAUTHORIZED

from notes_api.errors import ApiError, InternalError
from notes_api.observability.logging import get_logger
from notes_api.settings import Settings

log = get_logger(__name__)


def _error_body(code: str, message: str, **extra: Any) -> dict[str, Any]:
    return {"error": {"code": code, "message": message, **extra}}


def _render(exc: ApiError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == HTTP_401_UNAUTHORIZED else None
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.code, exc.message),
        headers=headers,
    )


def register_exception_handlers(app: FastAPI, *, settings: Settings) -> None:
    expose_details = settings.env != "prod"

    def _internal(exc: Exception) -> JSONResponse:
        err = InternalError()
        body = _error_body(err.code, err.message)
        if expose_details:
            body["error"]["detail"] = str(exc)
        return JSONResponse(status_code=err.status_code, content=body)

    @app.exception_handler(ApiError)
    async def _api_error(_: Request, exc: ApiError) -> JSONResponse:
        return _render(exc)

    @app.exception_handler(RequestValidationError)
    async def _validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content=_error_body(
                "BAD_USER_INPUT",
                "Request validation failed",
                fields=jsonable_encoder(exc.errors()),
            ),
        )

    @app.exception_handler(SQLAlchemyError)
    async def _storage_error(_: Request, exc: SQLAlchemyError) -> JSONResponse:
        log.exception("storage_error")
        return _internal(exc)

    @app.exception_handler(Exception)
    async def _unhandled(_: Request, exc: Exception) -> JSONResponse:
        log.exception("unhandled_error")
        return _internal(exc)

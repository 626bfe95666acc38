"""
notes_api.errors

Typed failure taxonomy shared by the policy, service and API layers.

Responsibilities:
- Give every failure a stable machine-readable code and an HTTP status.
- Keep messages safe to return to callers (no storage or stack detail).
"""

from __future__ import annotations

from starlette.status import (
    HTTP_401_UNAUTHORIZED,
    HTTP_403_FORBIDDEN,
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
    HTTP_500_INTERNAL_SERVER_ERROR,
)


class ApiError(Exception):
    code: str = "INTERNAL_ERROR"
    status_code: int = HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthenticated(ApiError):
    code = "UNAUTHENTICATED"
    status_code = HTTP_401_UNAUTHORIZED
    default_message = "You must be logged in to perform this action"


class Forbidden(ApiError):
    code = "FORBIDDEN"
    status_code = HTTP_403_FORBIDDEN
    default_message = "You do not have permission to perform this action"


class NotFound(ApiError):
    code = "NOT_FOUND"
    status_code = HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class AlreadyExists(ApiError):
    code = "ALREADY_EXISTS"
    status_code = HTTP_409_CONFLICT
    default_message = "Resource already exists"


class InvalidCredentials(ApiError):
    code = "INVALID_CREDENTIALS"
    status_code = HTTP_401_UNAUTHORIZED
    default_message = "Invalid email or password"


class InternalError(ApiError):
    pass

"""Application-specific exceptions for consistent error handling."""

from typing import Any

from fastapi import HTTPException, status


class AppError(HTTPException):
    """Application error with standardized error code."""

    status_code_default = status.HTTP_400_BAD_REQUEST
    code_default = "APP_ERROR"

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        code: str | None = None,
        details: dict[str, Any] | list[Any] | None = None,
    ):
        status_code = status_code or self.status_code_default
        code = code or self.code_default
        super().__init__(
            status_code=status_code,
            detail={
                "code": code,
                "message": message,
                "details": details,
            },
        )
        self.code = code
        self.message = message
        self.details = details


class UnauthorizedError(AppError):
    """Caller has no valid session."""

    status_code_default = status.HTTP_401_UNAUTHORIZED
    code_default = "UNAUTHORIZED"

    def __init__(self, message: str = "Unauthorized", **kwargs):
        super().__init__(message, **kwargs)


class ForbiddenError(AppError):
    """Caller is authenticated but lacks the required capability."""

    status_code_default = status.HTTP_403_FORBIDDEN
    code_default = "FORBIDDEN"


class InvalidRequestError(AppError):
    """Malformed or missing request input."""

    status_code_default = status.HTTP_400_BAD_REQUEST
    code_default = "INVALID_REQUEST"


class NotFoundError(AppError):
    status_code_default = status.HTTP_404_NOT_FOUND
    code_default = "NOT_FOUND"


class RepositoryError(AppError):
    """A query against the hosted database failed.

    Surfaced as a 400 carrying the underlying driver message, never retried.
    """

    status_code_default = status.HTTP_400_BAD_REQUEST
    code_default = "REPOSITORY_ERROR"

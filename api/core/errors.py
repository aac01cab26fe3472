"""
Domain errors shared by the builders and repositories.

Each error carries the HTTP status it maps to; `main.py` registers
`app_error_handler` so routers can let them propagate.
"""

from __future__ import annotations

from fastapi import Request, status
from fastapi.responses import JSONResponse


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidArgumentError(AppError):
    """Malformed or contradictory caller input."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(AppError):
    """Uniqueness violation on create."""

    status_code = status.HTTP_409_CONFLICT


class NotFoundError(AppError):
    """Lookup, update, delete or filter matched no rows."""

    status_code = status.HTTP_404_NOT_FOUND


async def app_error_handler(_: Request, exc: AppError) -> JSONResponse:
    # Same body shape as FastAPI's HTTPException.
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

"""
Application error taxonomy.

Services raise these; the exception handlers in app.main render them into the
standard response envelope. `message` is always safe to show to the client.
"""

from typing import Optional


class AppError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(AppError):
    """Malformed input. Carries the first violated rule."""
    status_code = 400
    default_message = "Invalid request"


class AuthError(AppError):
    """Missing (401) or invalid/expired (403) credentials."""
    status_code = 401
    default_message = "Access token required"


class NotFoundError(AppError):
    """Entity absent, or not owned by the caller."""
    status_code = 404
    default_message = "Not found"


class ConflictError(AppError):
    """Duplicate unique key."""
    status_code = 409
    default_message = "Resource already exists"


class DuplicateIdError(ConflictError):
    """Generated record id collided with an existing one."""
    default_message = "Duplicate record id"


class InternalError(AppError):
    """Unexpected collaborator failure. Details stay in the server logs."""
    status_code = 500
    default_message = "Internal server error"

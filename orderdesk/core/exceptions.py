"""
Application error taxonomy.

Every error carries the HTTP status it maps to; ``main.py`` registers a single
handler that turns an ``AppError`` into a JSON ``{"detail": ...}`` response.
"""
from typing import Optional


class AppError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """A required field is missing or malformed."""
    status_code = 400
    default_message = "Invalid request"


class DuplicateError(AppError):
    """A unique constraint was violated, e.g. an email already registered."""
    status_code = 400
    default_message = "Resource already exists"


class AuthenticationError(AppError):
    """No bearer token was presented."""
    status_code = 401
    default_message = "Not authenticated"


class InvalidTokenError(AuthenticationError):
    """A token was presented but is expired, tampered or malformed."""
    status_code = 403
    default_message = "Invalid or expired token"


class AuthorizationError(AppError):
    status_code = 403
    default_message = "Forbidden"


class NotFoundError(AppError):
    status_code = 404
    default_message = "Not found"


class PolicyError(AppError):
    """A business rule refused the operation."""
    status_code = 400
    default_message = "Operation not permitted"


class StoreError(AppError):
    status_code = 500
    default_message = "Internal server error"

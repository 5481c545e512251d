"""
Exceptions raised by the Service Layer that map directly onto HTTP responses.
The API layer renders them as ``{"detail": ...}`` with the matching status code.
"""

from fastapi import status


class AppHTTPException(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationError(AppHTTPException):
    """The request is well-formed but violates a business rule."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(AppHTTPException):
    """The requested resource does not exist (or its identifier is invalid)."""

    status_code = status.HTTP_404_NOT_FOUND

    @classmethod
    def for_model(cls, model: type) -> "NotFoundError":
        return cls(f"{model.__name__} not found.")


class ConflictError(AppHTTPException):
    """A uniqueness rule (email, username) would be violated."""

    status_code = status.HTTP_409_CONFLICT

from __future__ import annotations


class RequestError(Exception):
    """Raised when the backend answers with a non-2xx status."""

    def __init__(self, message: str, *, status_code: int | None = None, operation: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.operation = operation


class FormValidationError(ValueError):
    """Required input missing before any request is sent."""


class AuthenticationRequired(Exception):
    """No usable session: the caller must log in again."""

    def __init__(self, message: str = "Please log in to continue") -> None:
        super().__init__(message)
        self.message = message

from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for failures shown to the user."""


class ValidationError(DomainError):
    """Raised when form input is rejected before any request is sent."""


class ApiError(DomainError):
    """Raised when the HR API rejects a request or cannot be reached."""

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code

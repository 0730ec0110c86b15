"""Custom exception hierarchy for the novel outliner."""

from typing import Optional


class OutlinerError(Exception):
    """Base exception for all outliner errors."""

    code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


# ---- Access Errors ----

class UnauthorizedError(OutlinerError):
    """No resolvable caller identity."""

    code = "UNAUTHORIZED"

    def __init__(self, message: str = "You must be signed in to perform this action."):
        super().__init__(message)


class NotFoundError(OutlinerError):
    """Entity is missing or is not owned by the caller."""

    code = "NOT_FOUND"


# ---- Database Errors ----

class DatabaseError(OutlinerError):
    """Database operation was misused."""


# ---- Validation Errors ----

class ValidationError(OutlinerError):
    """Input validation failed."""

    code = "BAD_REQUEST"


class EmptyUpdateError(ValidationError):
    """An update call supplied no fields to change."""

    def __init__(self, message: str = "At least one field must be provided to update."):
        super().__init__(message)

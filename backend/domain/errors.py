from __future__ import annotations

from typing import Optional


class MovieTrackError(Exception):
    """Base class for MovieTrack errors."""


class ConfigurationError(MovieTrackError):
    """A required remote-service credential is not configured."""


class RemoteServiceError(MovieTrackError):
    """The movie catalog answered with a non-success status (or not at all)."""

    def __init__(self, message: str, *, status: Optional[int] = None, reason: str = "") -> None:
        super().__init__(message)
        self.status = status
        self.reason = reason


class AuthError(MovieTrackError):
    """Authentication business error; `str(err)` is safe to show to the user."""

    default_message = "Authentication failed"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)


class InvalidCredentials(AuthError):
    default_message = "Invalid email or password"


class DuplicateAccount(AuthError):
    default_message = "An account with this email already exists"


class CorruptLocalState(MovieTrackError):
    """Persisted value is not valid JSON or has the wrong shape.

    Raised and recovered inside the persistence adapter only.
    """

    def __init__(self, key: str, detail: str) -> None:
        super().__init__(f"corrupt local state under {key!r}: {detail}")
        self.key = key
        self.detail = detail

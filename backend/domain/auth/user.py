from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class StoredUser:
    """A registry entry. The password is kept in plain text (local demo auth)."""

    email: str
    password: str

    def matches_email(self, email: str) -> bool:
        return self.email.lower() == (email or "").lower()

    def to_dict(self) -> dict[str, str]:
        return {"email": self.email, "password": self.password}

    @classmethod
    def from_dict(cls, raw: Any) -> Optional["StoredUser"]:
        if not isinstance(raw, dict):
            return None
        email = raw.get("email")
        password = raw.get("password")
        if not isinstance(email, str) or not email or not isinstance(password, str):
            return None
        return cls(email=email, password=password)


@dataclass(frozen=True)
class AuthUser:
    """The logged-in identity persisted as the current session pointer."""

    email: str

    def to_dict(self) -> dict[str, str]:
        return {"email": self.email}

    @classmethod
    def from_dict(cls, raw: Any) -> Optional["AuthUser"]:
        if not isinstance(raw, dict):
            return None
        email = raw.get("email")
        if not isinstance(email, str) or not email:
            return None
        return cls(email=email)


@dataclass(frozen=True)
class SessionState:
    # True until the persisted pointer has been read once.
    loading: bool = True
    user: Optional[AuthUser] = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

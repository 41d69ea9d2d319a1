from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from domain.auth import AuthUser, SessionState

LOGIN_PATH = "/"


class AuthAction(str, Enum):
    WAIT = "wait"
    REDIRECT = "redirect"
    ALLOW = "allow"


@dataclass(frozen=True)
class AuthDecision:
    action: AuthAction
    user: Optional[AuthUser] = None
    redirect_to: Optional[str] = None


def require_auth(state: SessionState, *, redirect_to: str = LOGIN_PATH) -> AuthDecision:
    """Gate for pages that need a signed-in user.

    Never redirects while the session pointer has not been read yet.
    """
    if state.loading:
        return AuthDecision(action=AuthAction.WAIT)
    if state.user is None:
        return AuthDecision(action=AuthAction.REDIRECT, redirect_to=redirect_to)
    return AuthDecision(action=AuthAction.ALLOW, user=state.user)

from __future__ import annotations

from typing import Optional, Protocol

from domain.auth import AuthUser, SessionState


class AuthStorePort(Protocol):
    @property
    def state(self) -> SessionState:
        ...

    def restore(self) -> SessionState:
        ...

    def signup(self, email: str, password: str) -> AuthUser:
        ...

    def login(self, email: str, password: str) -> AuthUser:
        ...

    def logout(self) -> None:
        ...

    def current_session(self) -> Optional[AuthUser]:
        ...

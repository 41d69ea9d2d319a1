"""
Local credential registry and current-session pointer.

This is demo-grade, single-device auth: passwords are stored in plain text
next to the rest of local storage. It is not a trust boundary.

Keys (under the storage namespace):
  users        -> [{"email": ..., "password": ...}, ...]
  currentUser  -> {"email": ...}  (absent when anonymous)
"""

from __future__ import annotations

import logging
from typing import List, Optional

from application.ports.auth_store_port import AuthStorePort
from domain.auth import AuthUser, SessionState, StoredUser
from domain.errors import DuplicateAccount, InvalidCredentials
from infrastructure.persistence.local_storage.json_store import JsonKeyValueStore

logger = logging.getLogger(__name__)

USERS_KEY = "users"
CURRENT_USER_KEY = "currentUser"


class LocalAuthStore(AuthStorePort):
    def __init__(self, store: JsonKeyValueStore) -> None:
        self._store = store
        self._state = SessionState(loading=True, user=None)

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def user(self) -> Optional[AuthUser]:
        return self._state.user

    @property
    def loading(self) -> bool:
        return self._state.loading

    def _load_users(self) -> List[StoredUser]:
        raw_users = self._store.read(USERS_KEY, expect=list, default=None) or []
        users: List[StoredUser] = []
        for raw in raw_users:
            user = StoredUser.from_dict(raw)
            if user is None:
                logger.warning("Skipping malformed registry entry under %s", self._store.full_key(USERS_KEY))
                continue
            users.append(user)
        return users

    def _save_users(self, users: List[StoredUser]) -> None:
        self._store.write(USERS_KEY, [u.to_dict() for u in users])

    def _set_session(self, user: Optional[AuthUser]) -> None:
        self._state = SessionState(loading=False, user=user)
        if user is None:
            self._store.remove(CURRENT_USER_KEY)
        else:
            self._store.write(CURRENT_USER_KEY, user.to_dict())

    def current_session(self) -> Optional[AuthUser]:
        raw = self._store.read(CURRENT_USER_KEY, expect=dict, default=None)
        if raw is None:
            return None
        user = AuthUser.from_dict(raw)
        if user is None:
            logger.warning("Ignoring malformed session pointer under %s", self._store.full_key(CURRENT_USER_KEY))
        return user

    def restore(self) -> SessionState:
        self._state = SessionState(loading=False, user=self.current_session())
        return self._state

    def signup(self, email: str, password: str) -> AuthUser:
        users = self._load_users()
        if any(u.matches_email(email) for u in users):
            raise DuplicateAccount()

        self._save_users(users + [StoredUser(email=email, password=password)])
        user = AuthUser(email=email)
        self._set_session(user)
        logger.info("Registered local account %s", email)
        return user

    def login(self, email: str, password: str) -> AuthUser:
        match = next(
            (u for u in self._load_users() if u.matches_email(email) and u.password == password),
            None,
        )
        if match is None:
            raise InvalidCredentials()

        # Keep the casing the account was registered with.
        user = AuthUser(email=match.email)
        self._set_session(user)
        return user

    def logout(self) -> None:
        self._set_session(None)

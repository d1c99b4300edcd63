"""Client-side authentication state backed by a storage object."""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import ValidationError

from keuzekompas.features.users.schemas import UserPublic
from .api import ApiClient, ApiError
from .storage import TOKEN_KEY, USER_KEY

logger = logging.getLogger("client.session")


class AuthSession:
    """Holds the token and user of the signed-in account.

    State is restored from ``api.storage`` on construction. The session
    counts only when both a token and a readable user are stored; anything
    less clears it.
    """

    def __init__(self, api: ApiClient) -> None:
        self.api = api
        self.storage = api.storage
        self._user: Optional[UserPublic] = None
        self._restore()

    def _restore(self) -> None:
        token = self.storage.get(TOKEN_KEY)
        raw_user = self.storage.get(USER_KEY)
        if not token and not raw_user:
            return
        if not token or not raw_user:
            logger.warning("Incomplete stored session; clearing it")
            self._clear()
            return
        try:
            self._user = UserPublic.model_validate_json(raw_user)
        except ValidationError:
            logger.warning("Stored user is unreadable; clearing session")
            self._clear()

    def _clear(self) -> None:
        self.storage.remove(TOKEN_KEY)
        self.storage.remove(USER_KEY)
        self._user = None

    def _store(self, body: dict) -> UserPublic:
        user = UserPublic.model_validate(body["user"])
        self.storage.set(TOKEN_KEY, body["token"])
        self.storage.set(USER_KEY, user.model_dump_json())
        self._user = user
        return user

    @property
    def token(self) -> Optional[str]:
        return self.storage.get(TOKEN_KEY)

    @property
    def current_user(self) -> Optional[UserPublic]:
        return self._user

    @property
    def is_logged_in(self) -> bool:
        return bool(self.token) and self._user is not None

    def register(self, name: str, email: str, password: str) -> UserPublic:
        body = self.api.post("/auth/register", json={"name": name, "email": email, "password": password})
        return self._store(body)

    def login(self, email: str, password: str) -> UserPublic:
        body = self.api.post("/auth/login", json={"email": email, "password": password})
        user = self._store(body)
        logger.info("logged in as %s", user.email)
        return user

    def profile(self) -> UserPublic:
        body = self.api.get("/auth/profile")
        user = UserPublic.model_validate(body["user"])
        self.storage.set(USER_KEY, user.model_dump_json())
        self._user = user
        return user

    def logout(self) -> None:
        if self.token:
            try:
                self.api.post("/auth/logout")
            except ApiError as e:
                # local state is cleared regardless
                logger.debug("server logout failed: %s", e.message)
        self._clear()

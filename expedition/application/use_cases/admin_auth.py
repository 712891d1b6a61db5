from __future__ import annotations

import hmac
import logging
import secrets
import threading
import time
from typing import Callable

from expedition.application.exceptions import AdminAuthError


class AdminAuthUseCase:
    """
    Shared-password login for the dashboard.

    A correct password yields an opaque bearer token held in memory until it
    expires or is revoked. Tokens do not survive a restart.
    """

    def __init__(
        self,
        password: str,
        ttl_seconds: float,
        now: Callable[[], float] = time.monotonic,
    ) -> None:
        self._password = password
        self._ttl_seconds = ttl_seconds
        self._now = now
        self._tokens: dict[str, float] = {}
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    @property
    def ttl_seconds(self) -> float:
        return self._ttl_seconds

    def login(self, password: str) -> str:
        if not self._password or not hmac.compare_digest(password.encode("utf-8"), self._password.encode("utf-8")):
            self._logger.warning("Admin login rejected")
            raise AdminAuthError("Incorrect password")

        token = secrets.token_urlsafe(32)
        with self._lock:
            self._evict_expired()
            self._tokens[token] = self._now() + self._ttl_seconds
        self._logger.info("Admin logged in")
        return token

    def is_authenticated(self, token: str | None) -> bool:
        if not token:
            return False
        with self._lock:
            expires_at = self._tokens.get(token)
            if expires_at is None:
                return False
            if self._now() >= expires_at:
                del self._tokens[token]
                return False
            return True

    def logout(self, token: str) -> None:
        with self._lock:
            self._tokens.pop(token, None)

    def _evict_expired(self) -> None:
        now = self._now()
        expired = [token for token, expires_at in self._tokens.items() if now >= expires_at]
        for token in expired:
            del self._tokens[token]

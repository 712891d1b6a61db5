from __future__ import annotations

import secrets
import threading
import time
from typing import Callable

from expedition.application.ports.wizard_sessions import WizardSessionPort
from expedition.domain.entities.wizard_state import WizardState


class MemoryWizardSessionStore(WizardSessionPort):
    def __init__(self, ttl_seconds: float = 3600, now: Callable[[], float] = time.monotonic) -> None:
        self._sessions: dict[str, tuple[WizardState, float]] = {}
        self._ttl_seconds = ttl_seconds
        self._now = now
        self._lock = threading.Lock()

    def create(self, state: WizardState) -> str:
        session_id = secrets.token_urlsafe(16)
        with self._lock:
            self._evict_expired()
            self._sessions[session_id] = (state, self._now())
        return session_id

    def get(self, session_id: str) -> WizardState | None:
        with self._lock:
            entry = self._sessions.get(session_id)
            if entry is None:
                return None
            state, touched_at = entry
            if self._now() - touched_at > self._ttl_seconds:
                del self._sessions[session_id]
                return None
            return state

    def save(self, session_id: str, state: WizardState) -> None:
        with self._lock:
            self._sessions[session_id] = (state, self._now())

    def discard(self, session_id: str) -> None:
        with self._lock:
            self._sessions.pop(session_id, None)

    def _evict_expired(self) -> None:
        now = self._now()
        expired = [sid for sid, (_, touched_at) in self._sessions.items() if now - touched_at > self._ttl_seconds]
        for sid in expired:
            del self._sessions[sid]

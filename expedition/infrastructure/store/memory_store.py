from __future__ import annotations

import logging
import threading
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable

from expedition.application.ports.registration_store import RegistrationStorePort
from expedition.domain.entities.registration import (
    CreateResult,
    Registration,
    RegistrationInput,
    RegistrationStatus,
)


class MemoryRegistrationStore(RegistrationStorePort):
    backend_name = "memory"

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._records: dict[str, Registration] = {}
        self._lock = threading.Lock()
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._logger = logging.getLogger(__name__)

    def list_registrations(self) -> list[Registration]:
        with self._lock:
            records = list(self._records.values())
        return sorted(records, key=lambda r: r.date, reverse=True)

    def create(self, data: RegistrationInput) -> CreateResult:
        registration = Registration.create(data, created_at=self._clock())
        with self._lock:
            self._records[registration.id] = registration
        self._logger.info("Registration stored", extra={"registration_id": registration.id, "backend": self.backend_name})
        return CreateResult(success=True, registration_id=registration.id)

    def update_status(self, registration_id: str, status: RegistrationStatus) -> None:
        with self._lock:
            current = self._records.get(registration_id)
            if current is None:
                return
            self._records[registration_id] = replace(current, status=RegistrationStatus(status))

    def delete(self, registration_id: str) -> None:
        with self._lock:
            self._records.pop(registration_id, None)

from __future__ import annotations

import logging
from dataclasses import dataclass

from expedition.application.exceptions import ConfirmationRequiredError, UnsupportedOperationError
from expedition.application.ports.content import ContentPort
from expedition.application.ports.registration_store import RegistrationStorePort, SnapshotStorePort
from expedition.application.utils.registration_filters import compute_revenue, filter_registrations
from expedition.domain.entities.registration import Registration, RegistrationStatus
from expedition.application.utils.csv_export import registrations_to_csv


@dataclass(frozen=True)
class DashboardView:
    registrations: list[Registration]
    total_count: int
    filtered_count: int
    revenue: int


class AdminDashboardUseCase:
    def __init__(self, store: RegistrationStorePort, content: ContentPort) -> None:
        self._store = store
        self._content = content
        self._logger = logging.getLogger(__name__)

    @property
    def supports_snapshot(self) -> bool:
        return isinstance(self._store, SnapshotStorePort)

    def overview(self, search: str | None = None) -> DashboardView:
        registrations = self._store.list_registrations()
        filtered = filter_registrations(registrations, search)
        return DashboardView(
            registrations=filtered,
            total_count=len(registrations),
            filtered_count=len(filtered),
            revenue=compute_revenue(filtered, self._content.price_lookup()),
        )

    def update_status(self, registration_id: str, status: RegistrationStatus) -> None:
        status = RegistrationStatus(status)
        self._store.update_status(registration_id, status)
        self._logger.info("Registration status changed", extra={"registration_id": registration_id, "status": status.value})

    def delete(self, registration_id: str, confirmed: bool) -> None:
        if not confirmed:
            raise ConfirmationRequiredError("Deleting a registration must be confirmed")
        self._store.delete(registration_id)
        self._logger.info("Registration deleted", extra={"registration_id": registration_id})

    def export_csv(self, search: str | None = None) -> str:
        return registrations_to_csv(self.overview(search).registrations)

    def download_snapshot(self) -> tuple[str, str, bytes]:
        """Return (filename, media type, bytes) of the raw database image."""
        store = self._snapshot_store()
        return store.snapshot_filename, store.snapshot_media_type, store.export_snapshot()

    def wipe(self, confirmed: bool) -> None:
        store = self._snapshot_store()
        if not confirmed:
            raise ConfirmationRequiredError("Wiping the database must be confirmed")
        store.wipe()

    def _snapshot_store(self) -> SnapshotStorePort:
        if not isinstance(self._store, SnapshotStorePort):
            raise UnsupportedOperationError(f"{self._store.backend_name} backend has no database snapshot")
        return self._store

from abc import ABC, abstractmethod

from expedition.domain.entities.registration import (
    CreateResult,
    Registration,
    RegistrationInput,
    RegistrationStatus,
)


class RegistrationStorePort(ABC):
    backend_name: str = "unknown"

    @abstractmethod
    def list_registrations(self) -> list[Registration]:
        """
        Return every registration, newest first.
        Read failures are logged and yield an empty list; this never raises.
        """
        raise NotImplementedError

    @abstractmethod
    def create(self, data: RegistrationInput) -> CreateResult:
        """
        Persist a new registration. The id and creation date are assigned here
        and the status is always pending.
        """
        raise NotImplementedError

    @abstractmethod
    def update_status(self, registration_id: str, status: RegistrationStatus) -> None:
        """Overwrite the status of one registration. Unknown ids are a no-op."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, registration_id: str) -> None:
        """Remove one registration. Unknown ids are a no-op."""
        raise NotImplementedError


class SnapshotStorePort(RegistrationStorePort):
    """A store backed by a single database image that can be downloaded or wiped."""

    snapshot_filename: str = "database.sqlite"
    snapshot_media_type: str = "application/x-sqlite3"

    @abstractmethod
    def export_snapshot(self) -> bytes:
        raise NotImplementedError

    @abstractmethod
    def wipe(self) -> None:
        """Delete every registration, persist, then reload the store from its slot."""
        raise NotImplementedError

from abc import ABC, abstractmethod

from expedition.domain.entities.wizard_state import WizardState


class WizardSessionPort(ABC):
    @abstractmethod
    def create(self, state: WizardState) -> str:
        """Store a new wizard run and return its session id."""
        raise NotImplementedError

    @abstractmethod
    def get(self, session_id: str) -> WizardState | None:
        raise NotImplementedError

    @abstractmethod
    def save(self, session_id: str, state: WizardState) -> None:
        raise NotImplementedError

    @abstractmethod
    def discard(self, session_id: str) -> None:
        raise NotImplementedError

from abc import ABC, abstractmethod
from typing import Any

from expedition.domain.entities.pack import Pack


class ContentPort(ABC):
    @abstractmethod
    def languages(self) -> list[str]:
        raise NotImplementedError

    @abstractmethod
    def resolve_language(self, language: str | None) -> str:
        """Return a supported language tag, falling back to the default one."""
        raise NotImplementedError

    @abstractmethod
    def get_page(self, language: str) -> dict[str, Any]:
        raise NotImplementedError

    @abstractmethod
    def get_packs(self, language: str) -> list[Pack]:
        raise NotImplementedError

    @abstractmethod
    def get_pack(self, variant: str | None, language: str) -> Pack | None:
        raise NotImplementedError

    @abstractmethod
    def price_lookup(self) -> dict[str, int]:
        """Pack variant -> numeric price used for revenue totals."""
        raise NotImplementedError

    @abstractmethod
    def message(self, language: str, *path: str) -> str:
        """Look up a localized string by its key path, e.g. ("register", "error")."""
        raise NotImplementedError

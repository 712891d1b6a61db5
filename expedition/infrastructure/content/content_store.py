from __future__ import annotations

from typing import Any

from expedition.application.ports.content import ContentPort
from expedition.domain.entities.pack import Pack
from expedition.infrastructure.content.translations import CONTENT, DEFAULT_LANGUAGE


class StaticContentStore(ContentPort):
    def __init__(
        self,
        content: dict[str, dict[str, Any]] | None = None,
        default_language: str = DEFAULT_LANGUAGE,
    ) -> None:
        self._content = content or CONTENT
        self._default_language = default_language if default_language in self._content else DEFAULT_LANGUAGE

    def languages(self) -> list[str]:
        return list(self._content.keys())

    def resolve_language(self, language: str | None) -> str:
        lang = (language or "").strip().lower()
        return lang if lang in self._content else self._default_language

    def get_page(self, language: str) -> dict[str, Any]:
        return self._content[self.resolve_language(language)]

    def get_packs(self, language: str) -> list[Pack]:
        return [Pack.from_payload(p) for p in self.get_page(language)["data"]["packs"]]

    def get_pack(self, variant: str | None, language: str) -> Pack | None:
        for pack in self.get_packs(language):
            if pack.variant == variant:
                return pack
        return None

    def price_lookup(self) -> dict[str, int]:
        # Prices are the same in every language
        return {pack.variant: pack.price_value for pack in self.get_packs(self._default_language)}

    def message(self, language: str, *path: str) -> str:
        node: Any = self.get_page(language)
        for key in path:
            if not isinstance(node, dict) or key not in node:
                raise KeyError(".".join(path))
            node = node[key]
        return str(node)

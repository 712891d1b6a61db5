from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Pack:
    variant: str  # "essentiel" | "premium" | "elite"
    title: str
    price: str  # display string, e.g. "4 500€"
    price_value: int  # EUR, used for revenue totals
    description: str
    features: tuple[str, ...] = ()

    @staticmethod
    def from_payload(payload: dict[str, Any]) -> "Pack":
        return Pack(
            variant=str(payload["variant"]),
            title=str(payload.get("title", "")),
            price=str(payload.get("price", "")),
            price_value=int(payload.get("price_value", 0)),
            description=str(payload.get("description", "")),
            features=tuple(payload.get("features") or ()),
        )

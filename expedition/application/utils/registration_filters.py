from __future__ import annotations

from typing import Iterable, Mapping

from expedition.domain.entities.registration import Registration


def matches_search(registration: Registration, term: str) -> bool:
    """Case-insensitive substring match on last name, company or email."""
    needle = (term or "").lower()
    return (
        needle in (registration.last_name or "").lower()
        or needle in (registration.company or "").lower()
        or needle in (registration.email or "").lower()
    )


def filter_registrations(registrations: Iterable[Registration], term: str | None) -> list[Registration]:
    return [r for r in registrations if matches_search(r, term or "")]


def compute_revenue(registrations: Iterable[Registration], price_lookup: Mapping[str, int]) -> int:
    # unknown or missing pack contributes 0
    return sum(price_lookup.get(r.selected_pack or "", 0) for r in registrations)

from __future__ import annotations

import csv
import io
from typing import Iterable

from expedition.domain.entities.registration import Registration


CSV_HEADERS = [
    "id",
    "firstName",
    "lastName",
    "email",
    "phone",
    "company",
    "role",
    "selectedPack",
    "needsVisa",
    "message",
    "date",
    "status",
]

# Spreadsheets evaluate cells starting with these as formulas
FORMULA_PREFIXES = ("=", "+", "-", "@", "\t", "\r")


def neutralize_cell(value: str | None) -> str:
    text = value or ""
    if text.startswith(FORMULA_PREFIXES):
        return "'" + text
    return text


def registrations_to_csv(registrations: Iterable[Registration]) -> str:
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=CSV_HEADERS)
    writer.writeheader()
    for r in registrations:
        writer.writerow(
            {
                "id": r.id,
                "firstName": neutralize_cell(r.first_name),
                "lastName": neutralize_cell(r.last_name),
                "email": neutralize_cell(r.email),
                "phone": neutralize_cell(r.phone),
                "company": neutralize_cell(r.company),
                "role": neutralize_cell(r.role),
                "selectedPack": r.selected_pack or "",
                "needsVisa": "yes" if r.needs_visa else "no",
                "message": neutralize_cell(r.message),
                "date": r.date,
                "status": r.status.value,
            }
        )
    return buffer.getvalue()

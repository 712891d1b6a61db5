#!/usr/bin/env python3
"""
Seed the local SQLite store with demo registrations.

Usage:
  python3 scripts/seed_local.py            # adds the demo rows
  python3 scripts/seed_local.py --wipe     # empties the store first
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from expedition.core.config import settings
from expedition.domain.entities.registration import RegistrationInput, RegistrationStatus
from expedition.infrastructure.store.sqlite_store import SqliteRegistrationStore


DEMO_REGISTRATIONS: list[tuple[RegistrationInput, RegistrationStatus]] = [
    (
        RegistrationInput(
            first_name="Awa",
            last_name="Koné",
            email="awa@techafrica.ci",
            phone="+225 07 00 00 00",
            company="TechAfrica",
            role="CEO",
            selected_pack="premium",
            needs_visa=True,
        ),
        RegistrationStatus.PENDING,
    ),
    (
        RegistrationInput(
            first_name="Jean-Marc",
            last_name="Diallo",
            email="jm@agricorp.com",
            phone="+225 05 11 22 33",
            company="AgriCorp",
            role="Export Director",
            selected_pack="elite",
            needs_visa=False,
            message="Interested in the agri-food meetings.",
        ),
        RegistrationStatus.APPROVED,
    ),
    (
        RegistrationInput(
            first_name="Sophie",
            last_name="Morel",
            email="sophie@luxemode.fr",
            phone="+33 6 00 00 00 00",
            company="Luxe & Mode",
            role="Founder",
            selected_pack="essentiel",
            needs_visa=True,
        ),
        RegistrationStatus.REJECTED,
    ),
]


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the local registrations database")
    parser.add_argument("--snapshot", default=settings.LOCAL_SNAPSHOT_PATH)
    parser.add_argument("--baseline", default=settings.LOCAL_BASELINE_PATH)
    parser.add_argument("--wipe", action="store_true", help="Delete every registration first")
    args = parser.parse_args()

    store = SqliteRegistrationStore(snapshot_path=args.snapshot, baseline_path=args.baseline)
    print(f"Loaded store from {store.source}")

    if args.wipe:
        store.wipe()
        print("Store wiped")

    for data, status in DEMO_REGISTRATIONS:
        result = store.create(data)
        if not result.success:
            print(f"Failed to add {data.email}: {result.error}")
            continue
        if status != RegistrationStatus.PENDING:
            store.update_status(result.registration_id, status)
        print(f"Added {data.first_name} {data.last_name} ({status.value})")

    print(f"{len(store.list_registrations())} registrations in {args.snapshot}")
    store.close()


if __name__ == "__main__":
    main()

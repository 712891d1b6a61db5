"""
Shared pytest fixtures.

Environment variables are set before any expedition module is imported so that
pydantic-settings picks up safe test values.
"""
from __future__ import annotations

import itertools
import json
import os
from datetime import datetime, timedelta, timezone
from typing import Callable

os.environ.setdefault("STORE_BACKEND", "memory")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("ADMIN_PASSWORD", "admin123")
os.environ.setdefault("REGISTRATION_STRICT_VALIDATION", "true")

import httpx
import pytest

from expedition.domain.entities.registration import RegistrationInput
from expedition.infrastructure.store.memory_store import MemoryRegistrationStore
from expedition.infrastructure.store.sqlite_store import SqliteRegistrationStore
from expedition.infrastructure.store.supabase_store import SupabaseRegistrationStore


AWA = RegistrationInput(
    first_name="Awa",
    last_name="Koné",
    email="a@x.com",
    phone="+971500000",
    company="TechAfrica",
    role="CEO",
    selected_pack="premium",
    needs_visa=True,
    message="",
)


def make_clock(start: datetime | None = None) -> Callable[[], datetime]:
    """A clock that moves forward one minute per call, so creation order is stable."""
    origin = start or datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)
    ticks = itertools.count()
    return lambda: origin + timedelta(minutes=next(ticks))


class FakePostgrest:
    """Just enough of the PostgREST table API for the Supabase adapter."""

    def __init__(self) -> None:
        self.rows: list[dict] = []
        self.requests: list[httpx.Request] = []
        self.insert_failure: tuple[int, dict] | None = None
        self.read_failure: int | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        id_filter = request.url.params.get("id") or ""
        target = id_filter[3:] if id_filter.startswith("eq.") else None

        if request.method == "GET":
            if self.read_failure:
                return httpx.Response(self.read_failure, json={"message": "boom"})
            rows = sorted(self.rows, key=lambda r: r["created_at"], reverse=True)
            return httpx.Response(200, json=rows)
        if request.method == "POST":
            if self.insert_failure:
                status, body = self.insert_failure
                return httpx.Response(status, json=body)
            row = json.loads(request.content)
            self.rows.append(row)
            return httpx.Response(201)
        if request.method == "PATCH":
            patch = json.loads(request.content)
            for row in self.rows:
                if row["id"] == target:
                    row.update(patch)
            return httpx.Response(204)
        if request.method == "DELETE":
            self.rows = [r for r in self.rows if r["id"] != target]
            return httpx.Response(204)
        return httpx.Response(405)


@pytest.fixture
def fake_postgrest() -> FakePostgrest:
    return FakePostgrest()


def build_supabase_store(fake: FakePostgrest, **kwargs) -> SupabaseRegistrationStore:
    client = httpx.Client(transport=httpx.MockTransport(fake.handler))
    return SupabaseRegistrationStore(
        url=kwargs.pop("url", "https://project.supabase.co"),
        api_key=kwargs.pop("api_key", "anon-key"),
        operator_key=kwargs.pop("operator_key", ""),
        table="registrations",
        client=client,
        clock=kwargs.pop("clock", make_clock()),
    )


@pytest.fixture(params=["memory", "sqlite", "supabase"])
def store(request, tmp_path, fake_postgrest):
    """Every registration store backend, each with a deterministic clock."""
    if request.param == "memory":
        return MemoryRegistrationStore(clock=make_clock())
    if request.param == "sqlite":
        return SqliteRegistrationStore(
            snapshot_path=tmp_path / "slot.b64",
            baseline_path=tmp_path / "database.sqlite",
            clock=make_clock(),
        )
    return build_supabase_store(fake_postgrest)

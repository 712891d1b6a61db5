from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable

import httpx

from expedition.application.ports.registration_store import RegistrationStorePort
from expedition.core.config import settings
from expedition.domain.entities.registration import (
    CreateResult,
    Registration,
    RegistrationInput,
    RegistrationStatus,
    StoreErrorKind,
)


# Postgres "insufficient_privilege", returned by PostgREST when a row-level policy rejects a write
PERMISSION_DENIED_CODE = "42501"


class SupabaseRegistrationStore(RegistrationStorePort):
    """Registrations kept in a hosted Supabase table, reached through its PostgREST API."""

    backend_name = "supabase"

    def __init__(
        self,
        url: str | None = None,
        api_key: str | None = None,
        operator_key: str | None = None,
        table: str | None = None,
        client: httpx.Client | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._url = (url if url is not None else settings.SUPABASE_URL) or ""
        self._api_key = (api_key if api_key is not None else settings.SUPABASE_ANON_KEY) or ""
        # dashboard calls (read, status, delete) prefer the operator key
        self._operator_key = (operator_key if operator_key is not None else settings.SUPABASE_SERVICE_KEY) or ""
        self._table = table or settings.SUPABASE_TABLE
        self._client = client or httpx.Client(timeout=settings.SUPABASE_TIMEOUT_SECONDS)
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._logger = logging.getLogger(__name__)

        if not self.configured:
            self._logger.warning(
                "Supabase is not configured; reads return nothing and writes are rejected",
                extra={"backend": self.backend_name, "reason": "missing SUPABASE_URL or SUPABASE_ANON_KEY"},
            )

    @property
    def configured(self) -> bool:
        return bool(self._url.strip() and self._api_key.strip())

    def _endpoint(self) -> str:
        return f"{self._url.rstrip('/')}/rest/v1/{self._table}"

    def _headers(self, operator: bool = False) -> dict[str, str]:
        key = self._operator_key if operator and self._operator_key else self._api_key
        return {
            "apikey": key,
            "Authorization": f"Bearer {key}",
            "Content-Type": "application/json",
        }

    def list_registrations(self) -> list[Registration]:
        if not self.configured:
            return []
        try:
            response = self._client.get(
                self._endpoint(),
                params={"select": "*", "order": "created_at.desc"},
                headers=self._headers(operator=True),
            )
            response.raise_for_status()
            rows = response.json()
        except (httpx.HTTPError, ValueError) as e:
            self._logger.error("Error fetching registrations", extra={"backend": self.backend_name, "error": str(e)})
            return []

        registrations: list[Registration] = []
        for row in rows or []:
            try:
                registrations.append(_row_to_registration(row))
            except (KeyError, TypeError) as e:
                self._logger.warning("Skipping malformed registration row", extra={"error": str(e)})
        return registrations

    def create(self, data: RegistrationInput) -> CreateResult:
        if not self.configured:
            return CreateResult(success=False, error=StoreErrorKind.NOT_CONFIGURED)

        registration = Registration.create(data, created_at=self._clock())
        try:
            response = self._client.post(
                self._endpoint(),
                json=_registration_to_row(registration),
                headers={**self._headers(), "Prefer": "return=minimal"},
            )
        except httpx.HTTPError as e:
            self._logger.error("Error saving registration", extra={"backend": self.backend_name, "error": str(e)})
            return CreateResult(success=False, error=StoreErrorKind.WRITE_FAILED)

        if response.is_success:
            self._logger.info("Registration stored", extra={"registration_id": registration.id, "backend": self.backend_name})
            return CreateResult(success=True, registration_id=registration.id)

        kind = _classify_failure(response)
        self._logger.error(
            "Supabase rejected registration insert",
            extra={"backend": self.backend_name, "error": f"{response.status_code} {response.text}", "reason": kind.value},
        )
        return CreateResult(success=False, error=kind)

    def update_status(self, registration_id: str, status: RegistrationStatus) -> None:
        if not self.configured:
            return
        try:
            response = self._client.patch(
                self._endpoint(),
                params={"id": f"eq.{registration_id}"},
                json={"status": RegistrationStatus(status).value},
                headers=self._headers(operator=True),
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            self._logger.error(
                "Error updating status",
                extra={"registration_id": registration_id, "backend": self.backend_name, "error": str(e)},
            )

    def delete(self, registration_id: str) -> None:
        if not self.configured:
            return
        try:
            response = self._client.delete(
                self._endpoint(),
                params={"id": f"eq.{registration_id}"},
                headers=self._headers(operator=True),
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            self._logger.error(
                "Error deleting registration",
                extra={"registration_id": registration_id, "backend": self.backend_name, "error": str(e)},
            )


def _classify_failure(response: httpx.Response) -> StoreErrorKind:
    if response.status_code in (401, 403):
        return StoreErrorKind.PERMISSION_DENIED
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and str(body.get("code")) == PERMISSION_DENIED_CODE:
        return StoreErrorKind.PERMISSION_DENIED
    return StoreErrorKind.WRITE_FAILED


def _registration_to_row(registration: Registration) -> dict[str, Any]:
    return {
        "id": registration.id,
        "first_name": registration.first_name,
        "last_name": registration.last_name,
        "email": registration.email,
        "phone": registration.phone,
        "company": registration.company,
        "role": registration.role,
        "selected_pack": registration.selected_pack,
        "needs_visa": registration.needs_visa,
        "message": registration.message,
        "created_at": registration.date,
        "status": registration.status.value,
    }


def _row_to_registration(row: dict[str, Any]) -> Registration:
    return Registration(
        id=str(row["id"]),
        first_name=row.get("first_name") or "",
        last_name=row.get("last_name") or "",
        email=row.get("email") or "",
        phone=row.get("phone") or "",
        company=row.get("company") or "",
        role=row.get("role") or "",
        selected_pack=row.get("selected_pack") or None,
        needs_visa=bool(row.get("needs_visa")),
        message=row.get("message") or "",
        date=row.get("created_at") or "",
        status=RegistrationStatus.parse(row.get("status")),
    )

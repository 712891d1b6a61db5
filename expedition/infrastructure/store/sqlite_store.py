from __future__ import annotations

import base64
import binascii
import logging
import sqlite3
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable

from expedition.application.ports.registration_store import SnapshotStorePort
from expedition.core.config import settings
from expedition.domain.entities.registration import (
    CreateResult,
    Registration,
    RegistrationInput,
    RegistrationStatus,
    StoreErrorKind,
)


# Column names match database files exported by earlier releases of the site.
_COLUMNS = (
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
)

_CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS registrations (
    id TEXT PRIMARY KEY,
    firstName TEXT,
    lastName TEXT,
    email TEXT,
    phone TEXT,
    company TEXT,
    role TEXT,
    selectedPack TEXT,
    needsVisa INTEGER,
    message TEXT,
    date TEXT,
    status TEXT
)
"""


class SqliteRegistrationStore(SnapshotStorePort):
    """
    Embedded SQLite database kept in memory.

    After every mutation the whole database image is serialized, base64 encoded
    and written to the snapshot slot. On startup the store loads, in order of
    preference: the snapshot slot, the shipped baseline file, a new empty database.
    """

    backend_name = "sqlite"

    def __init__(
        self,
        snapshot_path: str | Path | None = None,
        baseline_path: str | Path | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._snapshot_path = Path(snapshot_path or settings.LOCAL_SNAPSHOT_PATH)
        self._baseline_path = Path(baseline_path or settings.LOCAL_BASELINE_PATH)
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._lock = threading.RLock()
        self._logger = logging.getLogger(__name__)
        self._conn: sqlite3.Connection | None = None
        self._source = "empty"
        self.reload()

    @property
    def source(self) -> str:
        """Where the current database came from: "snapshot", "baseline" or "empty"."""
        return self._source

    def reload(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
            self._conn = self._open()

    def _open(self) -> sqlite3.Connection:
        image = self._read_snapshot()
        if image is not None:
            try:
                conn = _connect(image)
                self._ensure_table(conn)
                self._source = "snapshot"
                self._logger.info("Loaded registrations from snapshot slot", extra={"backend": self.backend_name})
                return conn
            except sqlite3.DatabaseError as e:
                self._logger.warning("Snapshot slot is not a valid database", extra={"error": str(e)})

        if self._baseline_path.exists():
            try:
                conn = _connect(self._baseline_path.read_bytes())
                self._ensure_table(conn)
                self._source = "baseline"
                self._logger.info("Loaded registrations from baseline file", extra={"backend": self.backend_name})
                self._save(conn)
                return conn
            except (OSError, sqlite3.DatabaseError) as e:
                self._logger.warning("Baseline file could not be loaded", extra={"error": str(e)})

        conn = _connect(None)
        self._ensure_table(conn)
        self._source = "empty"
        self._logger.info("No database found, created an empty one", extra={"backend": self.backend_name})
        self._save(conn)
        return conn

    def _read_snapshot(self) -> bytes | None:
        if not self._snapshot_path.exists():
            return None
        try:
            text = self._snapshot_path.read_text(encoding="ascii").strip()
            if not text:
                return None
            return base64.b64decode(text, validate=True)
        except (OSError, UnicodeDecodeError, binascii.Error) as e:
            self._logger.warning("Snapshot slot could not be decoded", extra={"error": str(e)})
            return None

    def _save(self, conn: sqlite3.Connection) -> None:
        """Write the full database image into the snapshot slot atomically."""
        encoded = base64.b64encode(conn.serialize()).decode("ascii")
        self._snapshot_path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self._snapshot_path.with_suffix(self._snapshot_path.suffix + ".tmp")
        try:
            temp_path.write_text(encoded, encoding="ascii")
            temp_path.replace(self._snapshot_path)
        except OSError:
            if temp_path.exists():
                temp_path.unlink()
            raise

    @staticmethod
    def _ensure_table(conn: sqlite3.Connection) -> None:
        conn.execute(_CREATE_TABLE)
        conn.commit()

    def list_registrations(self) -> list[Registration]:
        try:
            with self._lock:
                self._ensure_table(self._conn)
                rows = self._conn.execute(
                    f"SELECT {', '.join(_COLUMNS)} FROM registrations ORDER BY date DESC"
                ).fetchall()
        except sqlite3.Error as e:
            self._logger.error("Error fetching registrations", extra={"backend": self.backend_name, "error": str(e)})
            return []
        return [_row_to_registration(dict(zip(_COLUMNS, row))) for row in rows]

    def create(self, data: RegistrationInput) -> CreateResult:
        registration = Registration.create(data, created_at=self._clock())
        try:
            with self._lock:
                self._ensure_table(self._conn)
                self._write(
                    f"INSERT INTO registrations ({', '.join(_COLUMNS)}) VALUES ({', '.join('?' * len(_COLUMNS))})",
                    (
                        registration.id,
                        registration.first_name,
                        registration.last_name,
                        registration.email,
                        registration.phone,
                        registration.company,
                        registration.role,
                        registration.selected_pack,
                        1 if registration.needs_visa else 0,
                        registration.message,
                        registration.date,
                        registration.status.value,
                    ),
                )
        except (sqlite3.Error, OSError) as e:
            self._logger.error("Error saving registration", extra={"backend": self.backend_name, "error": str(e)})
            return CreateResult(success=False, error=StoreErrorKind.WRITE_FAILED)

        self._logger.info("Registration stored", extra={"registration_id": registration.id, "backend": self.backend_name})
        return CreateResult(success=True, registration_id=registration.id)

    def update_status(self, registration_id: str, status: RegistrationStatus) -> None:
        self._mutate(
            "UPDATE registrations SET status = ? WHERE id = ?",
            (RegistrationStatus(status).value, registration_id),
            registration_id,
        )

    def delete(self, registration_id: str) -> None:
        self._mutate("DELETE FROM registrations WHERE id = ?", (registration_id,), registration_id)

    def _mutate(self, sql: str, params: tuple[Any, ...], registration_id: str) -> None:
        try:
            self._write(sql, params)
        except (sqlite3.Error, OSError) as e:
            self._logger.error(
                "Error updating registrations",
                extra={"registration_id": registration_id, "backend": self.backend_name, "error": str(e)},
            )

    def _write(self, sql: str, params: tuple[Any, ...] = ()) -> None:
        """
        Apply one statement and write the snapshot slot.

        If either step fails the live database is restored to its previous image,
        so it never holds a change the slot does not.
        """
        with self._lock:
            before = self._conn.serialize()
            try:
                self._conn.execute(sql, params)
                self._conn.commit()
                self._save(self._conn)
            except (sqlite3.Error, OSError):
                self._conn.rollback()
                self._conn.deserialize(before)
                raise

    def export_snapshot(self) -> bytes:
        with self._lock:
            return self._conn.serialize()

    def wipe(self) -> None:
        with self._lock:
            self._write("DELETE FROM registrations")
            self._logger.warning("All registrations wiped", extra={"backend": self.backend_name})
            self.reload()

    def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None


def _connect(image: bytes | None) -> sqlite3.Connection:
    conn = sqlite3.connect(":memory:", check_same_thread=False)
    if image:
        conn.deserialize(image)
        # deserialize() accepts arbitrary bytes; the first read validates them
        conn.execute("SELECT count(*) FROM sqlite_master").fetchone()
    return conn


def _row_to_registration(row: dict[str, Any]) -> Registration:
    return Registration(
        id=str(row["id"]),
        first_name=row.get("firstName") or "",
        last_name=row.get("lastName") or "",
        email=row.get("email") or "",
        phone=row.get("phone") or "",
        company=row.get("company") or "",
        role=row.get("role") or "",
        selected_pack=row.get("selectedPack") or None,
        needs_visa=row.get("needsVisa") == 1,
        message=row.get("message") or "",
        date=row.get("date") or "",
        status=RegistrationStatus.parse(row.get("status")),
    )

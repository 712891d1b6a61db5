from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum


class RegistrationStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    @classmethod
    def parse(cls, value: str | None) -> "RegistrationStatus":
        """Map a stored value onto the enum; anything unrecognised reads as pending."""
        try:
            return cls(str(value or "").strip().lower())
        except ValueError:
            return cls.PENDING


PACK_VARIANTS: tuple[str, ...] = ("essentiel", "premium", "elite")


class StoreErrorKind(str, Enum):
    PERMISSION_DENIED = "permission_denied"
    NOT_CONFIGURED = "not_configured"
    WRITE_FAILED = "write_failed"


def normalize_pack(value: str | None) -> str | None:
    pack = (value or "").strip().lower()
    return pack if pack in PACK_VARIANTS else None


@dataclass(frozen=True)
class RegistrationInput:
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    company: str = ""
    role: str = ""
    selected_pack: str | None = None
    needs_visa: bool = True
    message: str = ""


@dataclass(frozen=True)
class Registration:
    id: str
    first_name: str
    last_name: str
    email: str
    phone: str
    company: str
    role: str
    selected_pack: str | None
    needs_visa: bool
    message: str
    date: str  # ISO-8601, UTC
    status: RegistrationStatus = RegistrationStatus.PENDING

    @staticmethod
    def create(
        data: RegistrationInput,
        registration_id: str | None = None,
        created_at: datetime | None = None,
    ) -> "Registration":
        # status is never taken from the caller
        when = created_at or datetime.now(timezone.utc)
        return Registration(
            id=registration_id or str(uuid.uuid4()),
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
            phone=data.phone,
            company=data.company,
            role=data.role,
            selected_pack=data.selected_pack,
            needs_visa=bool(data.needs_visa),
            message=data.message,
            date=when.isoformat(),
            status=RegistrationStatus.PENDING,
        )

    def to_input(self) -> RegistrationInput:
        return RegistrationInput(
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            phone=self.phone,
            company=self.company,
            role=self.role,
            selected_pack=self.selected_pack,
            needs_visa=self.needs_visa,
            message=self.message,
        )


@dataclass(frozen=True)
class CreateResult:
    success: bool
    registration_id: str | None = None
    error: StoreErrorKind | None = None

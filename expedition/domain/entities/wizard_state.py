from __future__ import annotations

from dataclasses import dataclass

from expedition.domain.entities.registration import RegistrationInput


FIRST_STEP = 1
LAST_STEP = 3


@dataclass(frozen=True)
class PersonalInfo:
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    company: str = ""
    role: str = ""


@dataclass(frozen=True)
class ProgramChoice:
    selected_pack: str | None = None
    needs_visa: bool = True
    message: str = ""


@dataclass(frozen=True)
class WizardState:
    step: int = FIRST_STEP  # 1 personal info, 2 program choice, 3 review
    data: RegistrationInput = RegistrationInput()
    completed: bool = False
    registration_id: str | None = None
    error: str | None = None  # acknowledgment message of the last failed confirm

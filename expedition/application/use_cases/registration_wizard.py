from __future__ import annotations

import logging
from dataclasses import replace

from expedition.application.exceptions import (
    WizardSessionNotFound,
    WizardStepError,
    WizardValidationError,
)
from expedition.application.ports.content import ContentPort
from expedition.application.ports.registration_store import RegistrationStorePort
from expedition.application.ports.wizard_sessions import WizardSessionPort
from expedition.domain.entities.registration import RegistrationInput, StoreErrorKind, normalize_pack
from expedition.domain.entities.wizard_state import (
    FIRST_STEP,
    LAST_STEP,
    PersonalInfo,
    ProgramChoice,
    WizardState,
)


# Step 1 fields in display order, with the names the client knows them by
PERSONAL_FIELDS: tuple[tuple[str, str], ...] = (
    ("first_name", "firstName"),
    ("last_name", "lastName"),
    ("email", "email"),
    ("phone", "phone"),
    ("company", "company"),
    ("role", "role"),
)


class RegistrationWizardUseCase:
    """
    Three-step registration flow: personal info, program choice, review.

    With strict validation every step-1 field must be filled in and a pack must be
    chosen before leaving step 2. Without it both steps advance unconditionally.
    No step persists anything; only confirm() writes to the store.
    """

    def __init__(
        self,
        store: RegistrationStorePort,
        sessions: WizardSessionPort,
        content: ContentPort,
        strict_validation: bool = True,
    ) -> None:
        self._store = store
        self._sessions = sessions
        self._content = content
        self._strict = strict_validation
        self._logger = logging.getLogger(__name__)

    def start(self, initial_pack: str | None = None) -> tuple[str, WizardState]:
        state = WizardState(data=RegistrationInput(selected_pack=normalize_pack(initial_pack)))
        session_id = self._sessions.create(state)
        self._logger.info("Registration wizard started", extra={"session_id": session_id})
        return session_id, state

    def get(self, session_id: str) -> WizardState:
        state = self._sessions.get(session_id)
        if state is None:
            raise WizardSessionNotFound(session_id)
        return state

    def submit_personal(self, session_id: str, personal: PersonalInfo, language: str | None = None) -> WizardState:
        state = self._require_step(session_id, 1)

        if self._strict:
            for attr, field in PERSONAL_FIELDS:
                if not str(getattr(personal, attr) or "").strip():
                    raise WizardValidationError(field, self._message(language, "register", "validation", "required"))

        data = replace(
            state.data,
            first_name=personal.first_name,
            last_name=personal.last_name,
            email=personal.email,
            phone=personal.phone,
            company=personal.company,
            role=personal.role,
        )
        return self._advance(session_id, replace(state, data=data, error=None))

    def submit_program(self, session_id: str, program: ProgramChoice, language: str | None = None) -> WizardState:
        state = self._require_step(session_id, 2)
        pack = normalize_pack(program.selected_pack)

        data = replace(
            state.data,
            selected_pack=pack,
            needs_visa=bool(program.needs_visa),
            message=program.message or "",
        )

        if self._strict and pack is None:
            # keep what was entered on this step, stay on step 2
            self._sessions.save(session_id, replace(state, data=data))
            raise WizardValidationError("selectedPack", self._message(language, "register", "validation", "pack"))

        return self._advance(session_id, replace(state, data=data, error=None))

    def back(self, session_id: str) -> WizardState:
        state = self.get(session_id)
        if state.step <= FIRST_STEP:
            return state
        previous = replace(state, step=state.step - 1, error=None)
        self._sessions.save(session_id, previous)
        return previous

    def confirm(self, session_id: str, language: str | None = None) -> WizardState:
        state = self._require_step(session_id, LAST_STEP)

        result = self._store.create(state.data)
        if result.success:
            self._sessions.discard(session_id)
            self._logger.info(
                "Registration submitted",
                extra={"session_id": session_id, "registration_id": result.registration_id},
            )
            return replace(state, completed=True, registration_id=result.registration_id, error=None)

        if result.error == StoreErrorKind.PERMISSION_DENIED:
            message = self._message(language, "register", "permission_error")
        else:
            message = self._message(language, "register", "error")
        self._logger.warning(
            "Registration submit failed",
            extra={"session_id": session_id, "reason": result.error.value if result.error else None},
        )
        failed = replace(state, error=message)
        self._sessions.save(session_id, failed)
        return failed

    def _require_step(self, session_id: str, step: int) -> WizardState:
        state = self.get(session_id)
        if state.step != step:
            raise WizardStepError(f"Wizard is on step {state.step}, expected step {step}")
        return state

    def _advance(self, session_id: str, state: WizardState) -> WizardState:
        advanced = replace(state, step=min(state.step + 1, LAST_STEP))
        self._sessions.save(session_id, advanced)
        return advanced

    def _message(self, language: str | None, *path: str) -> str:
        return self._content.message(self._content.resolve_language(language), *path)

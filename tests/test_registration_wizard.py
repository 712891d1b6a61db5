"""
Tests for the three-step registration wizard.
"""

from __future__ import annotations

import pytest

from conftest import AWA, make_clock
from expedition.application.exceptions import (
    WizardSessionNotFound,
    WizardStepError,
    WizardValidationError,
)
from expedition.application.use_cases.registration_wizard import RegistrationWizardUseCase
from expedition.domain.entities.registration import CreateResult, RegistrationStatus, StoreErrorKind
from expedition.domain.entities.wizard_state import PersonalInfo, ProgramChoice
from expedition.infrastructure.content.content_store import StaticContentStore
from expedition.infrastructure.store.memory_store import MemoryRegistrationStore
from expedition.infrastructure.store.wizard_session_store import MemoryWizardSessionStore


PERSONAL = PersonalInfo(
    first_name=AWA.first_name,
    last_name=AWA.last_name,
    email=AWA.email,
    phone=AWA.phone,
    company=AWA.company,
    role=AWA.role,
)
PROGRAM = ProgramChoice(selected_pack="premium", needs_visa=True, message="")


class FlakyStore(MemoryRegistrationStore):
    """Fails create() with the given error until `failures` runs out."""

    def __init__(self, error: StoreErrorKind, failures: int = 1) -> None:
        super().__init__(clock=make_clock())
        self._error = error
        self._failures = failures

    def create(self, data):
        if self._failures > 0:
            self._failures -= 1
            return CreateResult(success=False, error=self._error)
        return super().create(data)


def _wizard(store=None, strict: bool = True) -> RegistrationWizardUseCase:
    return RegistrationWizardUseCase(
        store=store or MemoryRegistrationStore(clock=make_clock()),
        sessions=MemoryWizardSessionStore(),
        content=StaticContentStore(),
        strict_validation=strict,
    )


def test_start_is_on_step_one_with_visa_assistance_on():
    session_id, state = _wizard().start()

    assert session_id
    assert state.step == 1
    assert state.data.needs_visa is True
    assert state.data.selected_pack is None
    assert state.completed is False


def test_start_preselects_pack_and_ignores_unknown_pack():
    wizard = _wizard()

    _, state = wizard.start(initial_pack="elite")
    assert state.data.selected_pack == "elite"

    _, state = wizard.start(initial_pack="platinum")
    assert state.data.selected_pack is None


def test_full_run_stores_one_pending_registration():
    store = MemoryRegistrationStore(clock=make_clock())
    wizard = _wizard(store)
    session_id, _ = wizard.start()

    assert wizard.submit_personal(session_id, PERSONAL).step == 2
    assert wizard.submit_program(session_id, PROGRAM).step == 3
    state = wizard.confirm(session_id)

    assert state.completed is True
    assert state.error is None
    records = store.list_registrations()
    assert len(records) == 1
    assert records[0].id == state.registration_id
    assert records[0].to_input() == AWA
    assert records[0].status == RegistrationStatus.PENDING


def test_completed_session_is_closed():
    wizard = _wizard()
    session_id, _ = wizard.start()
    wizard.submit_personal(session_id, PERSONAL)
    wizard.submit_program(session_id, PROGRAM)
    wizard.confirm(session_id)

    with pytest.raises(WizardSessionNotFound):
        wizard.get(session_id)


def test_strict_wizard_requires_a_pack_and_keeps_step_one_data():
    wizard = _wizard(strict=True)
    session_id, _ = wizard.start()
    wizard.submit_personal(session_id, PERSONAL)

    with pytest.raises(WizardValidationError) as exc:
        wizard.submit_program(session_id, ProgramChoice(selected_pack=None, needs_visa=False, message="hi"))

    assert exc.value.field == "selectedPack"
    state = wizard.get(session_id)
    assert state.step == 2
    assert state.data.first_name == "Awa"
    assert state.data.company == "TechAfrica"
    assert state.data.message == "hi"


def test_lenient_wizard_allows_leaving_step_two_without_pack():
    wizard = _wizard(strict=False)
    session_id, _ = wizard.start()
    wizard.submit_personal(session_id, PERSONAL)

    state = wizard.submit_program(session_id, ProgramChoice(selected_pack=None))

    assert state.step == 3
    assert state.data.selected_pack is None


def test_strict_wizard_requires_every_personal_field():
    wizard = _wizard(strict=True)
    session_id, _ = wizard.start()

    with pytest.raises(WizardValidationError) as exc:
        wizard.submit_personal(session_id, PersonalInfo(first_name="Awa", last_name="Koné", email="  "))

    assert exc.value.field == "email"
    assert exc.value.message == "Ce champ est obligatoire."
    assert wizard.get(session_id).step == 1


def test_validation_messages_follow_language():
    wizard = _wizard(strict=True)
    session_id, _ = wizard.start()
    wizard.submit_personal(session_id, PERSONAL)

    with pytest.raises(WizardValidationError) as exc:
        wizard.submit_program(session_id, ProgramChoice(), language="en")

    assert exc.value.message == "Please select a pack to continue."


def test_lenient_wizard_accepts_blank_personal_fields():
    wizard = _wizard(strict=False)
    session_id, _ = wizard.start()

    assert wizard.submit_personal(session_id, PersonalInfo()).step == 2


def test_no_format_validation_on_email():
    wizard = _wizard(strict=True)
    session_id, _ = wizard.start()

    state = wizard.submit_personal(session_id, PersonalInfo(
        first_name="A", last_name="B", email="not-an-email", phone="x", company="C", role="D",
    ))

    assert state.step == 2
    assert state.data.email == "not-an-email"


def test_back_navigation_preserves_every_field():
    wizard = _wizard()
    session_id, _ = wizard.start()
    wizard.submit_personal(session_id, PERSONAL)
    on_review = wizard.submit_program(session_id, PROGRAM)

    assert wizard.back(session_id).step == 2
    on_first = wizard.back(session_id)
    assert on_first.step == 1
    assert on_first.data == on_review.data

    # resubmitting what the form shows returns to review with identical data
    data = on_first.data
    wizard.submit_personal(session_id, PersonalInfo(
        first_name=data.first_name, last_name=data.last_name, email=data.email,
        phone=data.phone, company=data.company, role=data.role,
    ))
    again = wizard.submit_program(session_id, ProgramChoice(
        selected_pack=data.selected_pack, needs_visa=data.needs_visa, message=data.message,
    ))
    assert again.step == 3
    assert again.data == on_review.data


def test_back_on_first_step_is_a_noop():
    wizard = _wizard()
    session_id, _ = wizard.start()

    assert wizard.back(session_id).step == 1


def test_steps_cannot_be_skipped():
    wizard = _wizard()
    session_id, _ = wizard.start()

    with pytest.raises(WizardStepError):
        wizard.submit_program(session_id, PROGRAM)
    with pytest.raises(WizardStepError):
        wizard.confirm(session_id)


def test_unknown_session():
    with pytest.raises(WizardSessionNotFound):
        _wizard().submit_personal("nope", PERSONAL)


def test_expired_session_is_gone():
    clock = {"now": 0.0}
    wizard = RegistrationWizardUseCase(
        store=MemoryRegistrationStore(),
        sessions=MemoryWizardSessionStore(ttl_seconds=60, now=lambda: clock["now"]),
        content=StaticContentStore(),
    )
    session_id, _ = wizard.start()
    clock["now"] = 61.0

    with pytest.raises(WizardSessionNotFound):
        wizard.get(session_id)


def test_permission_denied_keeps_user_on_review_with_remediation_message():
    store = FlakyStore(StoreErrorKind.PERMISSION_DENIED)
    wizard = _wizard(store)
    session_id, _ = wizard.start()
    wizard.submit_personal(session_id, PERSONAL)
    wizard.submit_program(session_id, PROGRAM)

    failed = wizard.confirm(session_id, language="en")

    assert failed.completed is False
    assert failed.step == 3
    assert "permission denied" in failed.error
    assert failed.data == AWA
    assert store.list_registrations() == []

    # resubmitting the same data succeeds once the backend accepts it
    retried = wizard.confirm(session_id, language="en")
    assert retried.completed is True
    assert retried.error is None
    assert len(store.list_registrations()) == 1


def test_generic_failure_uses_generic_message():
    wizard = _wizard(FlakyStore(StoreErrorKind.WRITE_FAILED))
    session_id, _ = wizard.start()
    wizard.submit_personal(session_id, PERSONAL)
    wizard.submit_program(session_id, PROGRAM)

    failed = wizard.confirm(session_id)

    assert failed.error == "Erreur lors de la sauvegarde."
    assert wizard.get(session_id).step == 3

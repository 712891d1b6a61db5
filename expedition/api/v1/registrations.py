from fastapi import APIRouter, Depends, HTTPException, Query

from expedition.api.v1.schemas import (
    PersonalInfoSchema,
    ProgramChoiceSchema,
    StartWizardRequestSchema,
    WizardResponseSchema,
    WizardStateSchema,
)
from expedition.application.exceptions import WizardSessionNotFound, WizardStepError, WizardValidationError
from expedition.application.use_cases.registration_wizard import RegistrationWizardUseCase
from expedition.domain.entities.wizard_state import WizardState
from expedition.wiring.dependencies import get_wizard_use_case

router = APIRouter()


def _response(session_id: str, state: WizardState) -> WizardResponseSchema:
    return WizardResponseSchema(session_id=session_id, state=WizardStateSchema.from_entity(state))


@router.post("/wizard", response_model=WizardResponseSchema, status_code=201)
def start_wizard(
    req: StartWizardRequestSchema | None = None,
    uc: RegistrationWizardUseCase = Depends(get_wizard_use_case),
):
    session_id, state = uc.start(initial_pack=req.initial_pack if req else None)
    return _response(session_id, state)


@router.get("/wizard/{session_id}", response_model=WizardResponseSchema)
def get_wizard(session_id: str, uc: RegistrationWizardUseCase = Depends(get_wizard_use_case)):
    try:
        state = uc.get(session_id)
    except WizardSessionNotFound:
        raise HTTPException(status_code=404, detail="Wizard session not found")
    return _response(session_id, state)


@router.post("/wizard/{session_id}/personal", response_model=WizardResponseSchema)
def submit_personal(
    session_id: str,
    req: PersonalInfoSchema,
    lang: str | None = Query(None),
    uc: RegistrationWizardUseCase = Depends(get_wizard_use_case),
):
    try:
        state = uc.submit_personal(session_id, req.to_entity(), language=lang)
    except WizardSessionNotFound:
        raise HTTPException(status_code=404, detail="Wizard session not found")
    except WizardStepError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except WizardValidationError as e:
        raise HTTPException(status_code=422, detail={"field": e.field, "message": e.message})
    return _response(session_id, state)


@router.post("/wizard/{session_id}/program", response_model=WizardResponseSchema)
def submit_program(
    session_id: str,
    req: ProgramChoiceSchema,
    lang: str | None = Query(None),
    uc: RegistrationWizardUseCase = Depends(get_wizard_use_case),
):
    try:
        state = uc.submit_program(session_id, req.to_entity(), language=lang)
    except WizardSessionNotFound:
        raise HTTPException(status_code=404, detail="Wizard session not found")
    except WizardStepError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except WizardValidationError as e:
        raise HTTPException(status_code=422, detail={"field": e.field, "message": e.message})
    return _response(session_id, state)


@router.post("/wizard/{session_id}/back", response_model=WizardResponseSchema)
def go_back(session_id: str, uc: RegistrationWizardUseCase = Depends(get_wizard_use_case)):
    try:
        state = uc.back(session_id)
    except WizardSessionNotFound:
        raise HTTPException(status_code=404, detail="Wizard session not found")
    return _response(session_id, state)


@router.post("/wizard/{session_id}/confirm", response_model=WizardResponseSchema)
def confirm(
    session_id: str,
    lang: str | None = Query(None),
    uc: RegistrationWizardUseCase = Depends(get_wizard_use_case),
):
    # A failed save still answers 200: the state carries the error and the data
    try:
        state = uc.confirm(session_id, language=lang)
    except WizardSessionNotFound:
        raise HTTPException(status_code=404, detail="Wizard session not found")
    except WizardStepError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _response(session_id, state)

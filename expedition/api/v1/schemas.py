from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from expedition.domain.entities.registration import Registration, RegistrationInput, RegistrationStatus
from expedition.domain.entities.wizard_state import PersonalInfo, ProgramChoice, WizardState


PackVariant = Literal["essentiel", "premium", "elite"]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StartWizardRequestSchema(CamelModel):
    initial_pack: PackVariant | None = None


class PersonalInfoSchema(CamelModel):
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    company: str = ""
    role: str = ""

    def to_entity(self) -> PersonalInfo:
        return PersonalInfo(**self.model_dump())


class ProgramChoiceSchema(CamelModel):
    selected_pack: PackVariant | None = None
    needs_visa: bool = True
    message: str = ""

    def to_entity(self) -> ProgramChoice:
        return ProgramChoice(**self.model_dump())


class RegistrationDataSchema(CamelModel):
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    company: str = ""
    role: str = ""
    selected_pack: str | None = None
    needs_visa: bool = True
    message: str = ""

    @staticmethod
    def from_entity(data: RegistrationInput) -> "RegistrationDataSchema":
        return RegistrationDataSchema(
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
            phone=data.phone,
            company=data.company,
            role=data.role,
            selected_pack=data.selected_pack,
            needs_visa=data.needs_visa,
            message=data.message,
        )


class WizardStateSchema(CamelModel):
    step: int
    data: RegistrationDataSchema
    completed: bool = False
    registration_id: str | None = None
    error: str | None = None

    @staticmethod
    def from_entity(state: WizardState) -> "WizardStateSchema":
        return WizardStateSchema(
            step=state.step,
            data=RegistrationDataSchema.from_entity(state.data),
            completed=state.completed,
            registration_id=state.registration_id,
            error=state.error,
        )


class WizardResponseSchema(CamelModel):
    session_id: str
    state: WizardStateSchema


class RegistrationSchema(RegistrationDataSchema):
    id: str
    date: str
    status: RegistrationStatus

    @staticmethod
    def from_entity(registration: Registration) -> "RegistrationSchema":
        return RegistrationSchema(
            id=registration.id,
            first_name=registration.first_name,
            last_name=registration.last_name,
            email=registration.email,
            phone=registration.phone,
            company=registration.company,
            role=registration.role,
            selected_pack=registration.selected_pack,
            needs_visa=registration.needs_visa,
            message=registration.message,
            date=registration.date,
            status=registration.status,
        )


class DashboardResponseSchema(CamelModel):
    registrations: list[RegistrationSchema]
    total_count: int
    filtered_count: int
    revenue: int
    supports_snapshot: bool = False


class LoginRequestSchema(BaseModel):
    password: str


class LoginResponseSchema(CamelModel):
    token: str
    token_type: str = "bearer"
    expires_in: int


class StatusUpdateRequestSchema(BaseModel):
    status: RegistrationStatus


class PackSchema(CamelModel):
    variant: PackVariant
    title: str
    price: str
    price_value: int
    description: str
    features: list[str] = Field(default_factory=list)


class ContentResponseSchema(BaseModel):
    language: str
    content: dict[str, Any]

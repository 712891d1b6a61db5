from functools import lru_cache
import logging

from expedition.core.config import settings
from expedition.application.ports.content import ContentPort
from expedition.application.ports.registration_store import RegistrationStorePort
from expedition.application.ports.wizard_sessions import WizardSessionPort
from expedition.application.use_cases.admin_auth import AdminAuthUseCase
from expedition.application.use_cases.admin_dashboard import AdminDashboardUseCase
from expedition.application.use_cases.registration_wizard import RegistrationWizardUseCase
from expedition.infrastructure.content.content_store import StaticContentStore
from expedition.infrastructure.store.memory_store import MemoryRegistrationStore
from expedition.infrastructure.store.sqlite_store import SqliteRegistrationStore
from expedition.infrastructure.store.supabase_store import SupabaseRegistrationStore
from expedition.infrastructure.store.wizard_session_store import MemoryWizardSessionStore


_registration_store: RegistrationStorePort | None = None
_wizard_sessions: WizardSessionPort | None = None
_admin_auth: AdminAuthUseCase | None = None


def get_registration_store() -> RegistrationStorePort:
    global _registration_store
    if _registration_store is None:
        logger = logging.getLogger(__name__)
        backend = settings.STORE_BACKEND.lower()
        if backend == "supabase":
            _registration_store = SupabaseRegistrationStore()
        elif backend == "memory":
            _registration_store = MemoryRegistrationStore()
        else:
            if backend != "sqlite":
                logger.warning("Unknown STORE_BACKEND, using sqlite", extra={"backend": backend})
            _registration_store = SqliteRegistrationStore()
        logger.info("Registration store ready", extra={"backend": _registration_store.backend_name})
    return _registration_store


def get_wizard_sessions() -> WizardSessionPort:
    global _wizard_sessions
    if _wizard_sessions is None:
        _wizard_sessions = MemoryWizardSessionStore(ttl_seconds=settings.WIZARD_SESSION_TTL_SECONDS)
    return _wizard_sessions


@lru_cache
def get_content_store() -> ContentPort:
    return StaticContentStore(default_language=settings.DEFAULT_LANGUAGE)


def get_admin_auth() -> AdminAuthUseCase:
    global _admin_auth
    if _admin_auth is None:
        _admin_auth = AdminAuthUseCase(
            password=settings.ADMIN_PASSWORD,
            ttl_seconds=settings.ADMIN_SESSION_TTL_SECONDS,
        )
    return _admin_auth


def get_wizard_use_case() -> RegistrationWizardUseCase:
    return RegistrationWizardUseCase(
        store=get_registration_store(),
        sessions=get_wizard_sessions(),
        content=get_content_store(),
        strict_validation=settings.REGISTRATION_STRICT_VALIDATION,
    )


def get_admin_dashboard_use_case() -> AdminDashboardUseCase:
    return AdminDashboardUseCase(store=get_registration_store(), content=get_content_store())


def reset_container(
    store: RegistrationStorePort | None = None,
    wizard_sessions: WizardSessionPort | None = None,
    admin_auth: AdminAuthUseCase | None = None,
) -> None:
    """Drop cached singletons, optionally replacing them (used by tests and scripts)."""
    global _registration_store, _wizard_sessions, _admin_auth
    _registration_store = store
    _wizard_sessions = wizard_sessions
    _admin_auth = admin_auth

class WizardValidationError(ValueError):
    """Raised when a wizard step is submitted without its required fields."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class WizardStepError(RuntimeError):
    """Raised when a transition is not allowed from the current wizard step."""
    pass


class WizardSessionNotFound(LookupError):
    """Raised when a wizard session id is unknown or has expired."""
    pass


class AdminAuthError(PermissionError):
    """Raised when the admin password or session token is rejected."""
    pass


class ConfirmationRequiredError(RuntimeError):
    """Raised when a destructive admin action is requested without confirmation."""
    pass


class UnsupportedOperationError(RuntimeError):
    """Raised when the configured store backend lacks a capability."""
    pass

class RegistrationFormError(Exception):
    """Base class for misuse of the registration form controller."""


class UnknownFieldError(RegistrationFormError, KeyError):
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown form field: {self.name!r}"


class FormClosedError(RegistrationFormError):
    """Raised when a submitted form is edited."""


class FormBusyError(RegistrationFormError):
    """Raised when a field is edited while a submit is still running."""

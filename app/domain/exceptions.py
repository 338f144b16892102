from __future__ import annotations

from dataclasses import dataclass

from app.domain.entities.user import UserStatus


class DomainError(Exception):
    """Base for domain errors."""


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


class ValidationFailedError(DomainError):
    """Login request is malformed."""

    def __init__(self, field_errors: list[FieldError]):
        self.field_errors = list(field_errors)
        fields = ", ".join(err.field for err in self.field_errors)
        super().__init__(f"Invalid login request: {fields}.")


class CaptchaInvalidError(DomainError):
    """Verification code is wrong, expired or was already used."""


class LoginInfoInvalidError(DomainError):
    """Unknown identity or wrong password."""


class UserStatusInvalidError(DomainError):
    """Credentials are valid but the account may not log in."""

    def __init__(self, status: UserStatus):
        self.status = status
        super().__init__(f"User status is {status.value}.")


class SessionInvalidError(DomainError):
    """Bearer token does not map to an active session."""


class LoginModeNotConfiguredError(DomainError):
    """No login handler is registered for the requested mode."""

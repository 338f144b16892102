from __future__ import annotations

from datetime import datetime, timezone

from app.application.dto.auth import LoginInput
from app.domain.entities.user import LoginMode
from app.domain.exceptions import FieldError


MAX_FIELD_LENGTHS = {
    "identifier": 255,
    "password": 256,
    "captcha_id": 64,
    "captcha_value": 16,
}


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def parse_login_mode(value: LoginMode | str | None) -> LoginMode | None:
    if isinstance(value, LoginMode):
        return value
    if value is None:
        return None
    try:
        return LoginMode(str(value).strip().lower())
    except ValueError:
        return None


def collect_login_field_errors(command: LoginInput) -> list[FieldError]:
    errors: list[FieldError] = []
    for field_name, max_length in MAX_FIELD_LENGTHS.items():
        value = getattr(command, field_name)
        if value is None or not str(value).strip():
            errors.append(FieldError(field=field_name, message="must not be blank"))
        elif len(value) > max_length:
            errors.append(FieldError(field=field_name, message=f"must be at most {max_length} characters"))
    if parse_login_mode(command.mode) is None:
        modes = ", ".join(mode.value for mode in LoginMode)
        errors.append(FieldError(field="mode", message=f"must be one of: {modes}"))
    return errors

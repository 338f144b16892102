from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from app.domain.entities.user import LoginMode


@dataclass(frozen=True)
class LoginInput:
    mode: LoginMode | str
    identifier: str
    password: str
    captcha_id: str
    captcha_value: str


@dataclass(frozen=True)
class LoginOutput:
    token: str
    principal: str
    issued_at: datetime
    roles: tuple[str, ...]


@dataclass(frozen=True)
class LogoutInput:
    principal: str


@dataclass(frozen=True)
class VerificationCodeOutput:
    id: str
    value: str
    expires_at: datetime


@dataclass(frozen=True)
class SessionTokenPayload:
    principal: str
    token_id: str
    issued_at: datetime
    expires_at: datetime

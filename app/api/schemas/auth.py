from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from app.domain.entities.user import LoginMode


class LoginRequest(BaseModel):
    mode: str = LoginMode.USERNAME.value
    identifier: str = ""
    password: str = ""
    captcha_id: str = ""
    captcha_value: str = ""


class TokenResponse(BaseModel):
    token: str
    token_type: str = "bearer"
    principal: str
    issued_at: datetime
    roles: list[str]


class VerificationCodeResponse(BaseModel):
    captcha_id: str
    captcha_value: str
    expires_at: datetime


class LogoutResponse(BaseModel):
    ok: bool

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from app.application.dto.auth import SessionTokenPayload


class TokenPort(Protocol):
    def create_session_token(self, *, principal: str, now: datetime) -> SessionTokenPayload:
        ...

    def encode_session_token(self, *, payload: SessionTokenPayload) -> str:
        ...

    def decode_session_token(self, *, token: str) -> SessionTokenPayload:
        ...

from __future__ import annotations

from datetime import datetime, timedelta
import secrets
from typing import Callable
from uuid import uuid4

from app.application.dto.auth import VerificationCodeOutput
from app.application.ports.verification_code_port import VerificationCodePort
from app.domain.entities.verification_code import VerificationCode

from .auth_common import utcnow


# No 0/O, 1/I/L: codes are read off an image by a human.
CODE_ALPHABET = "23456789ABCDEFGHJKMNPQRSTUVWXYZ"


class IssueVerificationCodeUseCase:
    def __init__(
        self,
        *,
        verification_code_port: VerificationCodePort,
        code_length: int,
        ttl_seconds: int,
        clock: Callable[[], datetime] = utcnow,
    ):
        if code_length <= 0:
            raise ValueError("code_length must be positive.")
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive.")
        self._verification_code_port = verification_code_port
        self._code_length = code_length
        self._ttl_seconds = ttl_seconds
        self._clock = clock

    def execute(self) -> VerificationCodeOutput:
        now = self._clock()
        code = VerificationCode(
            id=uuid4().hex,
            value="".join(secrets.choice(CODE_ALPHABET) for _ in range(self._code_length)),
            expires_at=now + timedelta(seconds=self._ttl_seconds),
        )
        self._verification_code_port.save(code, now=now)
        return VerificationCodeOutput(id=code.id, value=code.value, expires_at=code.expires_at)

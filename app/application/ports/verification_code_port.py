from __future__ import annotations

from datetime import datetime
from typing import Protocol

from app.domain.entities.verification_code import VerificationCode


class VerificationCodePort(Protocol):
    def save(self, code: VerificationCode, *, now: datetime) -> None:
        ...

    def validate(self, *, code_id: str, supplied_value: str, now: datetime) -> bool:
        ...

    def invalidate(self, *, code_id: str) -> None:
        ...

    def consume(self, *, code_id: str, supplied_value: str, now: datetime) -> bool:
        ...

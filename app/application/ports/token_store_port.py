from __future__ import annotations

from datetime import datetime
from typing import Protocol

from app.domain.entities.user import SessionToken


class TokenStorePort(Protocol):
    def issue(self, *, principal: str, now: datetime) -> SessionToken:
        ...

    def revoke(self, *, principal: str) -> None:
        ...

    def lookup(self, *, token: str, now: datetime) -> str | None:
        ...

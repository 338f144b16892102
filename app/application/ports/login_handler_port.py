from __future__ import annotations

from typing import Protocol

from app.application.dto.auth import LoginInput
from app.domain.entities.user import Identity


class LoginHandler(Protocol):
    def handle(self, command: LoginInput) -> Identity | None:
        ...

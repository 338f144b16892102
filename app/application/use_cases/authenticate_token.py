from __future__ import annotations

from datetime import datetime
from typing import Callable

from app.application.ports.token_store_port import TokenStorePort
from app.domain.exceptions import SessionInvalidError

from .auth_common import utcnow


class AuthenticateTokenUseCase:
    def __init__(self, *, token_store: TokenStorePort, clock: Callable[[], datetime] = utcnow):
        self._token_store = token_store
        self._clock = clock

    def execute(self, *, token: str) -> str:
        token = token.strip()
        if not token:
            raise SessionInvalidError("Missing session token.")
        principal = self._token_store.lookup(token=token, now=self._clock())
        if principal is None:
            raise SessionInvalidError("Session is invalid or has ended.")
        return principal

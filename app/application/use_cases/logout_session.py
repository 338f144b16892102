from __future__ import annotations

import logging

from app.application.dto.auth import LogoutInput
from app.application.ports.token_store_port import TokenStorePort


logger = logging.getLogger(__name__)


class LogoutSessionUseCase:
    def __init__(self, *, token_store: TokenStorePort):
        self._token_store = token_store

    def execute(self, command: LogoutInput) -> None:
        self._token_store.revoke(principal=command.principal)
        logger.info("logout: session_revoked principal=%s", command.principal)

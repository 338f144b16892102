from __future__ import annotations

from datetime import datetime
import logging

from app.application.dto.auth import SessionTokenPayload
from app.application.ports.token_port import TokenPort
from app.application.ports.token_store_port import TokenStorePort
from app.domain.entities.user import SessionToken
from app.infrastructure.stores.keyed_lock import KeyedLock


logger = logging.getLogger(__name__)


class InMemoryTokenStore(TokenStorePort):
    """Holds at most one live session token per principal."""

    def __init__(self, *, token_port: TokenPort, lock_stripes: int = 64):
        self._token_port = token_port
        self._sessions: dict[str, SessionTokenPayload] = {}
        self._locks = KeyedLock(lock_stripes)

    def issue(self, *, principal: str, now: datetime) -> SessionToken:
        payload = self._token_port.create_session_token(principal=principal, now=now)
        token = self._token_port.encode_session_token(payload=payload)
        with self._locks.for_key(principal):
            replaced = self._sessions.get(principal)
            self._sessions[principal] = payload
        if replaced is not None:
            logger.info("token_store: session_replaced principal=%s", principal)
        return SessionToken(principal=principal, token=token, issued_at=payload.issued_at)

    def revoke(self, *, principal: str) -> None:
        with self._locks.for_key(principal):
            self._sessions.pop(principal, None)

    def lookup(self, *, token: str, now: datetime) -> str | None:
        try:
            payload = self._token_port.decode_session_token(token=token)
        except ValueError:
            return None

        with self._locks.for_key(payload.principal):
            current = self._sessions.get(payload.principal)
            if current is None or current.token_id != payload.token_id:
                return None
            if current.expires_at <= now:
                self._sessions.pop(payload.principal, None)
                return None
        return payload.principal

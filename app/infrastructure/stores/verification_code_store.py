from __future__ import annotations

from datetime import datetime
import hmac
import logging

from app.application.ports.verification_code_port import VerificationCodePort
from app.domain.entities.verification_code import VerificationCode
from app.infrastructure.stores.keyed_lock import KeyedLock


logger = logging.getLogger(__name__)


class InMemoryVerificationCodeStore(VerificationCodePort):
    def __init__(
        self,
        *,
        case_sensitive: bool = False,
        purge_threshold: int = 1024,
        lock_stripes: int = 64,
    ):
        self._case_sensitive = case_sensitive
        self._purge_threshold = purge_threshold
        self._codes: dict[str, VerificationCode] = {}
        self._locks = KeyedLock(lock_stripes)

    def save(self, code: VerificationCode, *, now: datetime) -> None:
        with self._locks.for_key(code.id):
            self._codes[code.id] = code
        if len(self._codes) > self._purge_threshold:
            self.purge_expired(now=now)

    def validate(self, *, code_id: str, supplied_value: str, now: datetime) -> bool:
        with self._locks.for_key(code_id):
            code = self._codes.get(code_id)
        return self._matches(code, supplied_value, now)

    def invalidate(self, *, code_id: str) -> None:
        with self._locks.for_key(code_id):
            self._codes.pop(code_id, None)

    def consume(self, *, code_id: str, supplied_value: str, now: datetime) -> bool:
        with self._locks.for_key(code_id):
            code = self._codes.pop(code_id, None)
        return self._matches(code, supplied_value, now)

    def purge_expired(self, *, now: datetime) -> int:
        expired = [code.id for code in list(self._codes.values()) if code.is_expired(now)]
        removed = 0
        for code_id in expired:
            with self._locks.for_key(code_id):
                code = self._codes.get(code_id)
                if code is not None and code.is_expired(now):
                    del self._codes[code_id]
                    removed += 1
        if removed:
            logger.debug("verification_code_store: purged_expired count=%s", removed)
        return removed

    def _matches(self, code: VerificationCode | None, supplied_value: str, now: datetime) -> bool:
        if code is None or code.is_expired(now):
            return False
        expected = code.value
        supplied = supplied_value.strip()
        if not self._case_sensitive:
            expected = expected.upper()
            supplied = supplied.upper()
        return hmac.compare_digest(expected.encode("utf-8"), supplied.encode("utf-8"))

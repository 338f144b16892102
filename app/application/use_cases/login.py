from __future__ import annotations

from datetime import datetime
import logging
from typing import Callable

from app.application.dto.auth import LoginInput, LoginOutput
from app.application.ports.password_hasher_port import PasswordHasherPort
from app.application.ports.token_store_port import TokenStorePort
from app.application.ports.verification_code_port import VerificationCodePort
from app.domain.entities.user import Identity, UserStatus
from app.domain.exceptions import (
    CaptchaInvalidError,
    LoginInfoInvalidError,
    UserStatusInvalidError,
    ValidationFailedError,
)

from .auth_common import collect_login_field_errors, parse_login_mode, utcnow
from .login_handlers import LoginHandlerRegistry


logger = logging.getLogger(__name__)


class LoginUseCase:
    """Captcha check, identity resolution, credential check, status gate, token issuance.

    The verification code is consumed before any identity work happens, so a
    code can back at most one attempt whatever the outcome.
    """

    def __init__(
        self,
        *,
        verification_code_port: VerificationCodePort,
        login_handlers: LoginHandlerRegistry,
        password_hasher: PasswordHasherPort,
        token_store: TokenStorePort,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._verification_code_port = verification_code_port
        self._login_handlers = login_handlers
        self._password_hasher = password_hasher
        self._token_store = token_store
        self._clock = clock

    def execute(self, command: LoginInput) -> LoginOutput:
        now = self._clock()

        field_errors = collect_login_field_errors(command)
        if field_errors:
            if command.captcha_id and command.captcha_id.strip():
                self._verification_code_port.invalidate(code_id=command.captcha_id)
            raise ValidationFailedError(field_errors)
        mode = parse_login_mode(command.mode)

        if not self._verification_code_port.consume(
            code_id=command.captcha_id,
            supplied_value=command.captcha_value,
            now=now,
        ):
            logger.info("login: captcha_rejected captcha_id=%s", command.captcha_id)
            raise CaptchaInvalidError("Verification code is invalid or expired.")

        identity = self._login_handlers.get(mode).handle(command)
        identity = self._verify_credentials(identity, command.password)

        principal = identity.username
        self._token_store.revoke(principal=principal)
        session = self._token_store.issue(principal=principal, now=now)
        logger.info("login: token_issued principal=%s mode=%s", principal, mode.value)

        return LoginOutput(
            token=session.token,
            principal=principal,
            issued_at=session.issued_at,
            roles=tuple(sorted(identity.roles)),
        )

    def _verify_credentials(self, identity: Identity | None, password: str) -> Identity:
        # Unknown accounts and wrong passwords must be indistinguishable to the caller.
        if identity is None or not identity.roles:
            logger.info("login: identity_not_resolved")
            raise LoginInfoInvalidError("Invalid login information.")

        if identity.status == UserStatus.FORBIDDEN:
            raise UserStatusInvalidError(UserStatus.FORBIDDEN)
        if identity.status == UserStatus.UNACTIVATED:
            raise UserStatusInvalidError(UserStatus.UNACTIVATED)

        if not self._password_hasher.verify(password, identity.password_hash):
            logger.info("login: password_mismatch principal=%s", identity.username)
            raise LoginInfoInvalidError("Invalid login information.")

        return identity

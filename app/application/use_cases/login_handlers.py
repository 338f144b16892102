from __future__ import annotations

from app.application.dto.auth import LoginInput
from app.application.ports.identity_lookup_port import IdentityLookupPort
from app.application.ports.login_handler_port import LoginHandler
from app.domain.entities.user import Identity, LoginMode
from app.domain.exceptions import LoginModeNotConfiguredError

from .auth_common import normalize_email


class UsernameLoginHandler(LoginHandler):
    def __init__(self, *, identity_lookup: IdentityLookupPort):
        self._identity_lookup = identity_lookup

    def handle(self, command: LoginInput) -> Identity | None:
        return self._identity_lookup.get_by_username(username=command.identifier.strip())


class PhoneLoginHandler(LoginHandler):
    def __init__(self, *, identity_lookup: IdentityLookupPort):
        self._identity_lookup = identity_lookup

    def handle(self, command: LoginInput) -> Identity | None:
        return self._identity_lookup.get_by_phone(phone=command.identifier.strip())


class EmailLoginHandler(LoginHandler):
    def __init__(self, *, identity_lookup: IdentityLookupPort):
        self._identity_lookup = identity_lookup

    def handle(self, command: LoginInput) -> Identity | None:
        return self._identity_lookup.get_by_email(email=normalize_email(command.identifier))


class LoginHandlerRegistry:
    def __init__(self, handlers: dict[LoginMode, LoginHandler]):
        self._handlers = dict(handlers)

    def get(self, mode: LoginMode) -> LoginHandler:
        handler = self._handlers.get(mode)
        if handler is None:
            raise LoginModeNotConfiguredError(f"No login handler registered for mode '{mode.value}'.")
        return handler


def build_login_handler_registry(identity_lookup: IdentityLookupPort) -> LoginHandlerRegistry:
    return LoginHandlerRegistry(
        {
            LoginMode.USERNAME: UsernameLoginHandler(identity_lookup=identity_lookup),
            LoginMode.PHONE: PhoneLoginHandler(identity_lookup=identity_lookup),
            LoginMode.EMAIL: EmailLoginHandler(identity_lookup=identity_lookup),
        }
    )

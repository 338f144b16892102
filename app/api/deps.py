from __future__ import annotations

from functools import lru_cache

from fastapi import Depends, Header, HTTPException

from app.application.use_cases.authenticate_token import AuthenticateTokenUseCase
from app.application.use_cases.issue_verification_code import IssueVerificationCodeUseCase
from app.application.use_cases.login import LoginUseCase
from app.application.use_cases.login_handlers import (
    LoginHandlerRegistry,
    build_login_handler_registry,
)
from app.application.use_cases.logout_session import LogoutSessionUseCase
from app.domain.exceptions import SessionInvalidError
from app.infrastructure.db.engine import get_engine
from app.infrastructure.db.repositories.accounts_repository import SqlIdentityRepository
from app.infrastructure.security.password_hasher import PasswordHasher
from app.infrastructure.security.token_service import JwtTokenService
from app.infrastructure.stores.token_store import InMemoryTokenStore
from app.infrastructure.stores.verification_code_store import InMemoryVerificationCodeStore
from app.shared.config import get_settings


def _get_db_engine():
    settings = get_settings()
    if not settings.postgres_dsn:
        raise HTTPException(status_code=500, detail="POSTGRES_DSN is required.")
    return get_engine(settings.postgres_dsn)


@lru_cache(maxsize=1)
def _get_password_hasher() -> PasswordHasher:
    return PasswordHasher()


@lru_cache(maxsize=1)
def _get_token_service() -> JwtTokenService:
    settings = get_settings()
    if not settings.jwt_secret:
        raise HTTPException(status_code=500, detail="JWT_SECRET is required.")
    return JwtTokenService(
        jwt_secret=settings.jwt_secret,
        session_ttl_minutes=settings.session_ttl_minutes,
    )


@lru_cache(maxsize=1)
def _get_token_store() -> InMemoryTokenStore:
    return InMemoryTokenStore(token_port=_get_token_service())


@lru_cache(maxsize=1)
def _get_verification_code_store() -> InMemoryVerificationCodeStore:
    settings = get_settings()
    return InMemoryVerificationCodeStore(
        case_sensitive=settings.verification_code_case_sensitive,
    )


@lru_cache(maxsize=1)
def _get_login_handler_registry() -> LoginHandlerRegistry:
    return build_login_handler_registry(SqlIdentityRepository(_get_db_engine()))


def get_issue_verification_code_use_case() -> IssueVerificationCodeUseCase:
    settings = get_settings()
    return IssueVerificationCodeUseCase(
        verification_code_port=_get_verification_code_store(),
        code_length=settings.verification_code_length,
        ttl_seconds=settings.verification_code_ttl_seconds,
    )


def get_login_use_case() -> LoginUseCase:
    return LoginUseCase(
        verification_code_port=_get_verification_code_store(),
        login_handlers=_get_login_handler_registry(),
        password_hasher=_get_password_hasher(),
        token_store=_get_token_store(),
    )


def get_logout_session_use_case() -> LogoutSessionUseCase:
    return LogoutSessionUseCase(token_store=_get_token_store())


def get_authenticate_token_use_case() -> AuthenticateTokenUseCase:
    return AuthenticateTokenUseCase(token_store=_get_token_store())


def get_current_principal(
    authorization: str = Header(...),
    use_case: AuthenticateTokenUseCase = Depends(get_authenticate_token_use_case),
) -> str:
    if not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Invalid authorization header.")
    token = authorization.replace("Bearer ", "", 1).strip()
    if not token:
        raise HTTPException(status_code=401, detail="Missing session token.")

    try:
        return use_case.execute(token=token)
    except SessionInvalidError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc

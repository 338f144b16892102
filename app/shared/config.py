from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _bool(name: str, default: bool) -> bool:
    value = _env(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    postgres_dsn: str
    jwt_secret: str
    session_ttl_minutes: int
    verification_code_ttl_seconds: int
    verification_code_length: int
    verification_code_case_sensitive: bool
    cors_allow_origins: tuple[str, ...]


def get_settings() -> Settings:
    origins = _env("CORS_ALLOW_ORIGINS", "*")
    return Settings(
        postgres_dsn=_env("POSTGRES_DSN", ""),
        jwt_secret=_env("JWT_SECRET", ""),
        session_ttl_minutes=int(_env("SESSION_TTL_MINUTES", "720")),
        verification_code_ttl_seconds=int(_env("VERIFICATION_CODE_TTL_SECONDS", "300")),
        verification_code_length=int(_env("VERIFICATION_CODE_LENGTH", "4")),
        verification_code_case_sensitive=_bool("VERIFICATION_CODE_CASE_SENSITIVE", False),
        cors_allow_origins=tuple(item.strip() for item in origins.split(",") if item.strip()),
    )

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class UserStatus(str, Enum):
    ACTIVE = "ACTIVE"
    UNACTIVATED = "UNACTIVATED"
    FORBIDDEN = "FORBIDDEN"


class LoginMode(str, Enum):
    USERNAME = "username"
    PHONE = "phone"
    EMAIL = "email"


@dataclass(frozen=True)
class Identity:
    id: int
    username: str
    password_hash: str
    status: UserStatus
    roles: frozenset[str] = field(default_factory=frozenset)
    phone: str | None = None
    email: str | None = None


@dataclass(frozen=True)
class SessionToken:
    principal: str
    token: str
    issued_at: datetime

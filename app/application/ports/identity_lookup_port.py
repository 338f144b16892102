from __future__ import annotations

from typing import Protocol

from app.domain.entities.user import Identity


class IdentityLookupPort(Protocol):
    def get_by_username(self, *, username: str) -> Identity | None:
        ...

    def get_by_phone(self, *, phone: str) -> Identity | None:
        ...

    def get_by_email(self, *, email: str) -> Identity | None:
        ...

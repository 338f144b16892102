from __future__ import annotations

from typing import Any, Iterable, Mapping

from app.domain.entities.user import Identity, UserStatus


def map_row_to_identity(row: Mapping[str, Any], role_names: Iterable[str]) -> Identity:
    return Identity(
        id=int(row["id"]),
        username=row["username"],
        password_hash=row["password_hash"] or "",
        status=UserStatus(str(row["status"]).upper()),
        roles=frozenset(name.upper() for name in role_names if name),
        phone=row.get("phone"),
        email=row.get("email"),
    )

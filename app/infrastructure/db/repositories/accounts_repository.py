from __future__ import annotations

from sqlalchemy import text

from app.application.ports.identity_lookup_port import IdentityLookupPort
from app.domain.entities.user import Identity
from app.infrastructure.db.mappers.accounts_mapper import map_row_to_identity


_USER_COLUMNS = "id, username, password_hash, phone, email, status"


class SqlIdentityRepository(IdentityLookupPort):
    def __init__(self, engine):
        self._engine = engine

    def get_by_username(self, *, username: str) -> Identity | None:
        sql = f"""
            SELECT {_USER_COLUMNS}
            FROM public.users
            WHERE username = :username
            LIMIT 1
        """
        return self._fetch_identity(sql, {"username": username})

    def get_by_phone(self, *, phone: str) -> Identity | None:
        sql = f"""
            SELECT {_USER_COLUMNS}
            FROM public.users
            WHERE phone = :phone
            LIMIT 1
        """
        return self._fetch_identity(sql, {"phone": phone})

    def get_by_email(self, *, email: str) -> Identity | None:
        sql = f"""
            SELECT {_USER_COLUMNS}
            FROM public.users
            WHERE lower(email) = :email
            LIMIT 1
        """
        return self._fetch_identity(sql, {"email": email.lower()})

    def _fetch_identity(self, sql: str, params: dict) -> Identity | None:
        roles_sql = """
            SELECT r.role_name
            FROM public.user_roles ur
            JOIN public.roles r ON r.id = ur.role_id
            WHERE ur.user_id = :user_id
            ORDER BY r.role_name
        """
        with self._engine.connect() as conn:
            row = conn.execute(text(sql), params).mappings().first()
            if row is None:
                return None
            role_names = conn.execute(text(roles_sql), {"user_id": row["id"]}).scalars().all()
        return map_row_to_identity(row, role_names)

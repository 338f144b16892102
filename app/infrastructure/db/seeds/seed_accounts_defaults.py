from __future__ import annotations

from sqlalchemy import text

from app.application.ports.password_hasher_port import PasswordHasherPort
from app.domain.entities.user import UserStatus


DEFAULT_ROLES = ("ROLE_USER", "ROLE_ADMIN")


def seed_accounts_defaults(
    engine,
    *,
    password_hasher: PasswordHasherPort,
    admin_username: str,
    admin_password: str,
    admin_email: str | None = None,
) -> None:
    with engine.begin() as conn:
        for role_name in DEFAULT_ROLES:
            conn.execute(
                text(
                    """
                    INSERT INTO public.roles (role_name)
                    VALUES (:role_name)
                    ON CONFLICT (role_name) DO NOTHING
                    """
                ),
                {"role_name": role_name},
            )

        conn.execute(
            text(
                """
                INSERT INTO public.users (username, password_hash, email, status)
                VALUES (:username, :password_hash, :email, :status)
                ON CONFLICT (username) DO UPDATE
                SET password_hash = EXCLUDED.password_hash,
                    email = EXCLUDED.email,
                    status = EXCLUDED.status
                """
            ),
            {
                "username": admin_username,
                "password_hash": password_hasher.hash(admin_password),
                "email": admin_email,
                "status": UserStatus.ACTIVE.value,
            },
        )
        admin_id = conn.execute(
            text("SELECT id FROM public.users WHERE username = :username LIMIT 1"),
            {"username": admin_username},
        ).scalar_one()

        for role_name in DEFAULT_ROLES:
            conn.execute(
                text(
                    """
                    INSERT INTO public.user_roles (user_id, role_id)
                    SELECT :user_id, r.id
                    FROM public.roles r
                    WHERE r.role_name = :role_name
                    ON CONFLICT (user_id, role_id) DO NOTHING
                    """
                ),
                {"user_id": admin_id, "role_name": role_name},
            )

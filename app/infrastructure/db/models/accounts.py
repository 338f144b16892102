from __future__ import annotations

from sqlalchemy import BigInteger, ForeignKey, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.db.engine import Base


# SQLite only autoincrements INTEGER primary keys.
IdType = BigInteger().with_variant(Integer, "sqlite")


class UserModel(Base):
    __tablename__ = "users"
    __table_args__ = ({"schema": "public"},)

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)
    phone: Mapped[str | None] = mapped_column(Text, nullable=True, unique=True)
    email: Mapped[str | None] = mapped_column(Text, nullable=True, unique=True)
    status: Mapped[str] = mapped_column(Text, nullable=False, server_default=text("'UNACTIVATED'"))


class RoleModel(Base):
    __tablename__ = "roles"
    __table_args__ = ({"schema": "public"},)

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    role_name: Mapped[str] = mapped_column(Text, nullable=False, unique=True)


class UserRoleModel(Base):
    __tablename__ = "user_roles"
    __table_args__ = ({"schema": "public"},)

    user_id: Mapped[int] = mapped_column(IdType, ForeignKey("public.users.id"), primary_key=True)
    role_id: Mapped[int] = mapped_column(IdType, ForeignKey("public.roles.id"), primary_key=True)

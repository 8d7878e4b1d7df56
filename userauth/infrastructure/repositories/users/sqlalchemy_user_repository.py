# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from userauth.domain.users.entities import User as DomainUser
from userauth.domain.users.exceptions import PersistenceError, UniqueConstraintViolation
from userauth.domain.users.repositories import UserRepository
from userauth.infrastructure.db.models import User
from userauth.infrastructure.db.session import Database

_UNIQUE_VIOLATION_SQLSTATE = "23505"


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone-aware columns.
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        email=row.email,
        password_hash=row.password_hash,
        created_at=_as_utc(row.created_at),
        updated_at=_as_utc(row.updated_at),
    )


def _is_unique_violation(exc: IntegrityError) -> bool:
    orig = exc.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate is not None:
        return sqlstate == _UNIQUE_VIOLATION_SQLSTATE
    return "unique" in str(orig).lower()


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, database: Database) -> None:
        self._db = database

    def create(self, user: DomainUser) -> DomainUser:
        try:
            with self._db.session_scope() as session:
                row = User(
                    id=user.id,
                    username=user.username,
                    email=user.email,
                    password_hash=user.password_hash,
                    created_at=user.created_at,
                    updated_at=user.updated_at,
                )
                session.add(row)
                session.flush()
                persisted = _to_domain(row)
        except IntegrityError as exc:
            if _is_unique_violation(exc):
                raise UniqueConstraintViolation("username or email already taken") from exc
            raise PersistenceError(f"insert rejected: {type(exc.orig).__name__}") from exc
        except SQLAlchemyError as exc:
            raise PersistenceError(f"insert failed: {type(exc).__name__}") from exc
        return persisted

    def find_by_username(self, username: str) -> DomainUser | None:
        try:
            with self._db.session_scope() as session:
                row = session.scalars(select(User).where(User.username == username)).first()
                return _to_domain(row) if row else None
        except SQLAlchemyError as exc:
            raise PersistenceError(f"lookup failed: {type(exc).__name__}") from exc

    def exists_by_username_or_email(self, username: str, email: str) -> int:
        stmt = (
            select(func.count())
            .select_from(User)
            .where(or_(User.username == username, User.email == email))
        )
        try:
            with self._db.session_scope() as session:
                return int(session.scalar(stmt) or 0)
        except SQLAlchemyError as exc:
            raise PersistenceError(f"existence check failed: {type(exc).__name__}") from exc

    def update_password(self, user_id: UUID, password_hash: str, updated_at: datetime) -> DomainUser:
        try:
            with self._db.session_scope() as session:
                row = session.get(User, user_id)
                if row is None:
                    raise PersistenceError(f"user {user_id} no longer exists")
                row.password_hash = password_hash
                row.updated_at = updated_at
                session.flush()
                return _to_domain(row)
        except SQLAlchemyError as exc:
            raise PersistenceError(f"password update failed: {type(exc).__name__}") from exc

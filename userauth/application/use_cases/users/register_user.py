# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from typing import Any
from uuid import UUID, uuid4

from userauth.application.services.validation import validate_create_user
from userauth.domain.users.entities import AuthResult, User
from userauth.domain.users.exceptions import (
    PersistenceError,
    PersistenceFailedError,
    UniqueConstraintViolation,
    UserAlreadyExistsError,
)
from userauth.domain.users.repositories import PasswordHasher, TokenIssuer, UserRepository
from userauth.shared.logging import logger


def _utcnow() -> datetime:
    return datetime.now(UTC)


class RegisterUserUseCase:
    """validate -> uniqueness pre-check -> hash -> insert -> issue token.

    The pre-check only spares hashing work and gives the common case a clean
    answer; the repository's unique index decides races between concurrent
    registrations, and its violation is reported as already registered.
    """

    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
        token_issuer: TokenIssuer,
        clock: Callable[[], datetime] = _utcnow,
        id_factory: Callable[[], UUID] = uuid4,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._token_issuer = token_issuer
        self._clock = clock
        self._id_factory = id_factory

    def execute(self, data: Mapping[str, Any]) -> AuthResult:
        request = validate_create_user(data)

        try:
            existing = self._users.exists_by_username_or_email(request.username, request.email)
        except PersistenceError as exc:
            raise PersistenceFailedError(str(exc)) from exc
        if existing > 0:
            logger.info("auth.register: rejected, username or email taken (pre-check)")
            raise UserAlreadyExistsError()

        hashed = self._password_hasher.hash(request.password)

        now = self._clock()
        user = User(
            id=self._id_factory(),
            username=request.username,
            email=request.email,
            password_hash=hashed,
            created_at=now,
            updated_at=now,
        )
        try:
            persisted = self._users.create(user)
        except UniqueConstraintViolation as exc:
            logger.info("auth.register: rejected, username or email taken (unique index)")
            raise UserAlreadyExistsError() from exc
        except PersistenceError as exc:
            raise PersistenceFailedError(str(exc)) from exc

        token = self._token_issuer.issue(str(persisted.id), now)
        logger.info(f"auth.register: ok user_id={persisted.id}")
        return AuthResult(token=token, user=persisted.profile())

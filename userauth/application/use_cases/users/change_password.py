# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from typing import Any

from userauth.application.services.credentials import CredentialVerifier
from userauth.application.services.validation import validate_change_password
from userauth.domain.users.entities import AuthResult
from userauth.domain.users.exceptions import PersistenceError, PersistenceFailedError
from userauth.domain.users.repositories import PasswordHasher, TokenIssuer, UserRepository
from userauth.shared.logging import logger


def _utcnow() -> datetime:
    return datetime.now(UTC)


class ChangePasswordUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
        token_issuer: TokenIssuer,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._users = users
        self._credentials = CredentialVerifier(users=users, password_hasher=password_hasher)
        self._password_hasher = password_hasher
        self._token_issuer = token_issuer
        self._clock = clock

    def execute(self, data: Mapping[str, Any]) -> AuthResult:
        request = validate_change_password(data)
        user = self._credentials.authenticate(request.username, request.old_password)

        hashed = self._password_hasher.hash(request.new_password)
        now = self._clock()
        try:
            updated = self._users.update_password(user.id, hashed, now)
        except PersistenceError as exc:
            raise PersistenceFailedError(str(exc)) from exc

        token = self._token_issuer.issue(str(updated.id), now)
        logger.info(f"auth.change_password: ok user_id={updated.id}")
        return AuthResult(token=token, user=updated.profile())

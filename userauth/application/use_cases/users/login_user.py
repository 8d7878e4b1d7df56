# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from typing import Any

from userauth.application.services.credentials import CredentialVerifier
from userauth.application.services.validation import validate_login
from userauth.domain.users.entities import AuthResult
from userauth.domain.users.exceptions import UserNotFoundError
from userauth.domain.users.repositories import PasswordHasher, TokenIssuer, UserRepository
from userauth.shared.logging import logger


def _utcnow() -> datetime:
    return datetime.now(UTC)


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
        token_issuer: TokenIssuer,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._credentials = CredentialVerifier(users=users, password_hasher=password_hasher)
        self._token_issuer = token_issuer
        self._clock = clock

    def execute(self, data: Mapping[str, Any]) -> AuthResult:
        request = validate_login(data)

        try:
            user = self._credentials.authenticate(request.username, request.password)
        except UserNotFoundError:
            logger.info("auth.login: unknown username")
            raise

        token = self._token_issuer.issue(str(user.id), self._clock())
        logger.info(f"auth.login: ok user_id={user.id}")
        return AuthResult(token=token, user=user.profile())

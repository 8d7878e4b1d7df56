# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets

from userauth.domain.users.entities import User
from userauth.domain.users.exceptions import (
    InvalidCredentialsError,
    PersistenceError,
    PersistenceFailedError,
    UserNotFoundError,
)
from userauth.domain.users.repositories import PasswordHasher, UserRepository


class CredentialVerifier:
    """Username lookup followed by password verification.

    An unknown username still pays for one verification against a decoy digest,
    so the response time does not tell whether the account exists.
    """

    def __init__(self, *, users: UserRepository, password_hasher: PasswordHasher) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._decoy_hash: str | None = None

    def _decoy(self) -> str:
        if self._decoy_hash is None:
            self._decoy_hash = self._password_hasher.hash(secrets.token_urlsafe(16))
        return self._decoy_hash

    def authenticate(self, username: str, password: str) -> User:
        try:
            user = self._users.find_by_username(username)
        except PersistenceError as exc:
            raise PersistenceFailedError(str(exc)) from exc

        if user is None:
            self._password_hasher.verify(password, self._decoy())
            raise UserNotFoundError()

        if not self._password_hasher.verify(password, user.password_hash):
            raise InvalidCredentialsError()
        return user

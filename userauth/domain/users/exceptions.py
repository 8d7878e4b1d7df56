# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import ClassVar


class AuthErrorKind(StrEnum):
    BAD_INPUT = "bad_input"
    ALREADY_REGISTERED = "already_registered"
    USER_NOT_FOUND = "user_not_found"
    BAD_CREDENTIALS = "bad_credentials"
    INTERNAL_HASHING = "internal_hashing"
    INTERNAL_PERSISTENCE = "internal_persistence"
    INTERNAL_TOKEN_ENCODING = "internal_token_encoding"


class AuthError(Exception):
    kind: ClassVar[AuthErrorKind]
    message: ClassVar[str]

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.message)
        self.detail = detail


class BadInputError(AuthError):
    kind = AuthErrorKind.BAD_INPUT
    message = "error validating fields"

    def __init__(self, fields: Mapping[str, str]) -> None:
        super().__init__(f"invalid fields: {', '.join(sorted(fields))}")
        self.fields = dict(fields)


class UserAlreadyExistsError(AuthError):
    kind = AuthErrorKind.ALREADY_REGISTERED
    message = "user already registered"


class UserNotFoundError(AuthError):
    kind = AuthErrorKind.USER_NOT_FOUND
    message = "user not found"


class InvalidCredentialsError(AuthError):
    kind = AuthErrorKind.BAD_CREDENTIALS
    message = "bad credentials"


class PasswordHashingError(AuthError):
    kind = AuthErrorKind.INTERNAL_HASHING
    message = "could not hash password"


class PersistenceFailedError(AuthError):
    kind = AuthErrorKind.INTERNAL_PERSISTENCE
    message = "could not persist user"


class TokenEncodingError(AuthError):
    kind = AuthErrorKind.INTERNAL_TOKEN_ENCODING
    message = "error encoding jwt"


class RepositoryError(Exception):
    pass


class UniqueConstraintViolation(RepositoryError):
    pass


class PersistenceError(RepositoryError):
    pass


class InvalidTokenError(Exception):
    pass

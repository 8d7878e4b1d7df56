# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import AuthResult, Claims, User, UserProfile
from .exceptions import (
    AuthError,
    AuthErrorKind,
    BadInputError,
    InvalidCredentialsError,
    InvalidTokenError,
    PasswordHashingError,
    PersistenceError,
    PersistenceFailedError,
    RepositoryError,
    TokenEncodingError,
    UniqueConstraintViolation,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from .repositories import PasswordHasher, TokenIssuer, UserRepository

__all__ = [
    "AuthError",
    "AuthErrorKind",
    "AuthResult",
    "BadInputError",
    "Claims",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "PasswordHasher",
    "PasswordHashingError",
    "PersistenceError",
    "PersistenceFailedError",
    "RepositoryError",
    "TokenEncodingError",
    "TokenIssuer",
    "UniqueConstraintViolation",
    "User",
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "UserProfile",
    "UserRepository",
]

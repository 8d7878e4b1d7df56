# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Translation of authentication failures into HTTP errors.

Every ``AuthErrorKind`` has exactly one arm below; adding a kind without a
mapping fails type checking at ``assert_never``.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import assert_never

from userauth.domain.users.exceptions import AuthError, AuthErrorKind, BadInputError
from userauth.shared.errors.base import AppError, DomainError, InfrastructureError, ValidationError


def map_auth_error(error: AuthError) -> AppError:
    kind = error.kind
    match kind:
        case AuthErrorKind.BAD_INPUT:
            fields = error.fields if isinstance(error, BadInputError) else {}
            return ValidationError(kind.value, fields=fields)
        case AuthErrorKind.ALREADY_REGISTERED:
            return DomainError(
                code=kind.value,
                status=HTTPStatus.CONFLICT,
                message="user already registered",
            )
        case AuthErrorKind.USER_NOT_FOUND | AuthErrorKind.BAD_CREDENTIALS:
            # Unknown usernames are indistinguishable from wrong passwords.
            return DomainError(
                code=AuthErrorKind.BAD_CREDENTIALS.value,
                status=HTTPStatus.NOT_ACCEPTABLE,
                message="bad credentials",
            )
        case (
            AuthErrorKind.INTERNAL_HASHING
            | AuthErrorKind.INTERNAL_PERSISTENCE
            | AuthErrorKind.INTERNAL_TOKEN_ENCODING
        ):
            return InfrastructureError(kind.value)
        case _:
            assert_never(kind)


__all__ = ["map_auth_error"]

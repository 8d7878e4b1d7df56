from __future__ import annotations

from http import HTTPStatus

import pytest

from userauth.domain.users.exceptions import (
    AuthError,
    AuthErrorKind,
    BadInputError,
    InvalidCredentialsError,
    PasswordHashingError,
    PersistenceFailedError,
    TokenEncodingError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from userauth.interfaces.http.error_mapper import map_auth_error


def test_bad_input_carries_field_errors() -> None:
    error = map_auth_error(BadInputError({"email": "invalid email"}))

    assert error.status == HTTPStatus.BAD_REQUEST
    assert error.to_dict() == {
        "message": "error validating fields",
        "error": {"fields": {"email": "invalid email"}},
    }


def test_already_registered_is_conflict() -> None:
    error = map_auth_error(UserAlreadyExistsError())

    assert error.status == HTTPStatus.CONFLICT
    assert error.to_dict() == {"message": "user already registered"}


@pytest.mark.parametrize("exc", [UserNotFoundError(), InvalidCredentialsError()])
def test_unknown_user_and_wrong_password_look_identical(exc: AuthError) -> None:
    error = map_auth_error(exc)

    assert error.status == HTTPStatus.NOT_ACCEPTABLE
    assert error.to_dict() == {"message": "bad credentials"}


@pytest.mark.parametrize(
    "exc",
    [
        PasswordHashingError("argon2 exploded"),
        PersistenceFailedError("db password=hunter2 rejected"),
        TokenEncodingError("bad key"),
    ],
)
def test_internal_failures_hide_detail(exc: AuthError) -> None:
    error = map_auth_error(exc)

    assert error.status == HTTPStatus.INTERNAL_SERVER_ERROR
    assert error.to_dict() == {"message": "internal server error"}
    assert error.code == exc.kind.value


def test_every_kind_has_a_mapping() -> None:
    by_kind = {
        cls.kind: cls
        for cls in (
            InvalidCredentialsError,
            PasswordHashingError,
            PersistenceFailedError,
            TokenEncodingError,
            UserAlreadyExistsError,
            UserNotFoundError,
        )
    }
    for kind in AuthErrorKind:
        if kind is AuthErrorKind.BAD_INPUT:
            continue
        assert map_auth_error(by_kind[kind]()).status >= HTTPStatus.BAD_REQUEST

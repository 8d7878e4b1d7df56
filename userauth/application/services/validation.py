# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Input validation for registration, login and password change.

Every failing field is reported at once as ``{field: reason}`` where reason is
``"invalid <code>"`` (``length``, ``email``, ``required``, ``type``).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from userauth.domain.users.exceptions import BadInputError
from userauth.shared.errors.validation import format_field_errors
from userauth.shared.errors.validation_types import ValidationErrorType

USERNAME_MIN_LENGTH = 6
USERNAME_MAX_LENGTH = 25
PASSWORD_MIN_LENGTH = 6

ModelT = TypeVar("ModelT", bound=BaseModel)


def _check_username(value: str) -> str:
    if not USERNAME_MIN_LENGTH <= len(value) <= USERNAME_MAX_LENGTH:
        raise PydanticCustomError(
            ValidationErrorType.LENGTH,
            "Username must be between {min_length} and {max_length} characters long",
            {"min_length": USERNAME_MIN_LENGTH, "max_length": USERNAME_MAX_LENGTH},
        )
    return value


def _check_password(value: str) -> str:
    if len(value) < PASSWORD_MIN_LENGTH:
        raise PydanticCustomError(
            ValidationErrorType.LENGTH,
            "Password must be at least {min_length} characters long",
            {"min_length": PASSWORD_MIN_LENGTH},
        )
    return value


def _check_present(value: str) -> str:
    if not value:
        raise PydanticCustomError(ValidationErrorType.REQUIRED, "Field cannot be empty", {})
    return value


class CreateUserRequest(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    username: str
    email: str
    password: str = Field(repr=False)

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        return _check_username(value)

    @field_validator("email")
    @classmethod
    def validate_email_syntax(cls, value: str) -> str:
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError as exc:
            raise PydanticCustomError(
                ValidationErrorType.EMAIL,
                "Email is not well-formed: {reason}",
                {"reason": str(exc)},
            ) from exc
        return value

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        return _check_password(value)


class LoginRequest(BaseModel):
    """Presence check only; shape is never validated on login."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    username: str
    password: str = Field(repr=False)

    @field_validator("username", "password")
    @classmethod
    def validate_present(cls, value: str) -> str:
        return _check_present(value)


class ChangePasswordRequest(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    username: str
    old_password: str = Field(repr=False)
    new_password: str = Field(repr=False)

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        return _check_username(value)

    @field_validator("old_password", "new_password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        return _check_password(value)


def _validate(model: type[ModelT], data: Mapping[str, Any] | Any) -> ModelT:
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        raise BadInputError(format_field_errors(exc)) from None


def validate_create_user(data: Mapping[str, Any]) -> CreateUserRequest:
    return _validate(CreateUserRequest, data)


def validate_login(data: Mapping[str, Any]) -> LoginRequest:
    return _validate(LoginRequest, data)


def validate_change_password(data: Mapping[str, Any]) -> ChangePasswordRequest:
    return _validate(ChangePasswordRequest, data)


__all__ = [
    "ChangePasswordRequest",
    "CreateUserRequest",
    "LoginRequest",
    "validate_change_password",
    "validate_create_user",
    "validate_login",
]

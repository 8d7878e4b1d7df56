# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from enum import StrEnum


class ValidationErrorType(StrEnum):
    LENGTH = "length"
    EMAIL = "email"
    REQUIRED = "required"
    TYPE = "type"


# Pydantic's built-in error types that can reach the field error map.
PYDANTIC_ERROR_TYPES: dict[str, ValidationErrorType] = {
    "missing": ValidationErrorType.REQUIRED,
    "string_type": ValidationErrorType.TYPE,
}


def reason_for(error_type: str) -> str:
    try:
        resolved = ValidationErrorType(error_type)
    except ValueError:
        resolved = PYDANTIC_ERROR_TYPES.get(error_type, ValidationErrorType.TYPE)
    return f"invalid {resolved.value}"


__all__ = ["ValidationErrorType", "reason_for"]

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError

from .validation_types import reason_for


def format_field_errors(exc: PydanticValidationError) -> dict[str, str]:
    """Collapse pydantic errors into ``{field: reason}``, first reason per field."""
    fields: dict[str, str] = {}

    for error in exc.errors():
        loc = error.get("loc", ())
        field_path = ".".join(str(part) for part in loc if part is not None) or "body"
        fields.setdefault(field_path, reason_for(error.get("type", "")))

    return fields


__all__ = [
    "format_field_errors",
]

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import AliasGenerator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from userauth.domain.users.entities import AuthResult


class UserDTO(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=AliasGenerator(serialization_alias=to_camel),
    )

    id: UUID
    username: str
    email: str
    created_at: datetime
    updated_at: datetime


class AuthResultDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    token: str
    user: UserDTO

    @classmethod
    def payload(cls, result: AuthResult) -> dict[str, Any]:
        return cls.model_validate(result).model_dump(mode="json", by_alias=True)


class StatusDTO(BaseModel):
    status: str = "OK"

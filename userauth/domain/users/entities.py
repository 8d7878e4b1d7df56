# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(slots=True, frozen=True)
class User:

    id: UUID
    username: str
    email: str
    password_hash: str
    created_at: datetime
    updated_at: datetime

    def profile(self) -> UserProfile:
        return UserProfile(
            id=self.id,
            username=self.username,
            email=self.email,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


@dataclass(slots=True, frozen=True)
class UserProfile:
    """Outward view of a user; carries no password material."""

    id: UUID
    username: str
    email: str
    created_at: datetime
    updated_at: datetime


@dataclass(slots=True, frozen=True)
class Claims:

    subject: str
    issued_at: datetime
    expires_at: datetime

    def to_payload(self) -> dict[str, int | str]:
        return {
            "sub": self.subject,
            "iat": int(self.issued_at.timestamp()),
            "exp": int(self.expires_at.timestamp()),
        }


@dataclass(slots=True, frozen=True)
class AuthResult:

    token: str
    user: UserProfile

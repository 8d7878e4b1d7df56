# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime
from typing import Protocol
from uuid import UUID

from .entities import User


class UserRepository(Protocol):
    """Durable user store; username and email are unique at the storage level.

    ``create`` raises ``UniqueConstraintViolation`` when either value is taken
    and ``PersistenceError`` for any other storage failure.
    """

    def create(self, user: User) -> User: ...
    def find_by_username(self, username: str) -> User | None: ...
    def exists_by_username_or_email(self, username: str, email: str) -> int: ...
    def update_password(self, user_id: UUID, password_hash: str, updated_at: datetime) -> User: ...


class PasswordHasher(Protocol):
    def hash(self, password: str | bytes) -> str: ...
    def verify(self, password: str | bytes, hashed: str) -> bool: ...


class TokenIssuer(Protocol):
    def issue(self, subject_id: str, now: datetime) -> str: ...

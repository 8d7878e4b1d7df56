from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest

from userauth.domain.users.entities import User
from userauth.domain.users.exceptions import PersistenceError, UniqueConstraintViolation
from userauth.infrastructure.db import Database
from userauth.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from userauth.shared.config import DatabaseConfig

NOW = datetime(2025, 3, 1, 12, 0, tzinfo=UTC)


@pytest.fixture()
def database() -> Iterator[Database]:
    db = Database(DatabaseConfig(DATABASE_URL="sqlite://"))
    db.create_schema()
    yield db
    db.dispose()


@pytest.fixture()
def repo(database: Database) -> SqlAlchemyUserRepository:
    return SqlAlchemyUserRepository(database)


def _user(username: str = "testuser", email: str = "test@email.com") -> User:
    return User(
        id=uuid4(),
        username=username,
        email=email,
        password_hash="$argon2id$fake",
        created_at=NOW,
        updated_at=NOW,
    )


def test_create_and_find(repo: SqlAlchemyUserRepository) -> None:
    created = repo.create(_user())

    found = repo.find_by_username("testuser")

    assert found == created
    assert found.created_at.tzinfo is not None
    assert repo.find_by_username("someoneelse") is None


def test_exists_counts_username_or_email(repo: SqlAlchemyUserRepository) -> None:
    repo.create(_user())

    assert repo.exists_by_username_or_email("testuser", "x@mail.com") == 1
    assert repo.exists_by_username_or_email("otheruser", "test@email.com") == 1
    assert repo.exists_by_username_or_email("otheruser", "x@mail.com") == 0


@pytest.mark.parametrize(
    ("username", "email"),
    [("testuser", "other@email.com"), ("otheruser", "test@email.com")],
)
def test_unique_index_rejects_duplicates(
    repo: SqlAlchemyUserRepository, username: str, email: str
) -> None:
    repo.create(_user())

    with pytest.raises(UniqueConstraintViolation):
        repo.create(_user(username, email))

    assert repo.exists_by_username_or_email("testuser", "test@email.com") == 1


def test_update_password(repo: SqlAlchemyUserRepository) -> None:
    user = repo.create(_user())
    later = NOW + timedelta(hours=1)

    updated = repo.update_password(user.id, "$argon2id$new", later)

    assert updated.password_hash == "$argon2id$new"
    assert updated.updated_at == later
    assert repo.find_by_username("testuser").password_hash == "$argon2id$new"


def test_update_password_for_missing_user(repo: SqlAlchemyUserRepository) -> None:
    with pytest.raises(PersistenceError):
        repo.update_password(uuid4(), "$argon2id$new", NOW)


def test_storage_failure_becomes_persistence_error(database: Database) -> None:
    repo = SqlAlchemyUserRepository(database)
    database.drop_schema()

    with pytest.raises(PersistenceError):
        repo.find_by_username("testuser")

from __future__ import annotations

import threading

import pytest
from argon2 import PasswordHasher as Argon2Library
from argon2.exceptions import VerificationError

from userauth.application.services.password_hashing import (
    Argon2PasswordHasher,
    BoundedPasswordHasher,
)
from userauth.domain.users.exceptions import PasswordHashingError
from userauth.domain.users.repositories import PasswordHasher


@pytest.fixture()
def argon2() -> Argon2PasswordHasher:
    return Argon2PasswordHasher(time_cost=1, memory_cost=8, parallelism=1)


def test_hash_is_self_describing_argon2id(argon2: Argon2PasswordHasher) -> None:
    digest = argon2.hash("secret123")

    assert digest.startswith("$argon2id$")
    assert "secret123" not in digest
    assert argon2.verify("secret123", digest) is True
    assert argon2.verify("secret124", digest) is False


def test_hash_uses_fresh_salt(argon2: Argon2PasswordHasher) -> None:
    assert argon2.hash("secret123") != argon2.hash("secret123")


def test_verify_accepts_bytes(argon2: Argon2PasswordHasher) -> None:
    digest = argon2.hash(b"secret123")

    assert argon2.verify("secret123", digest) is True


def test_verify_reads_parameters_from_digest(argon2: Argon2PasswordHasher) -> None:
    stronger = Argon2PasswordHasher(time_cost=2, memory_cost=16, parallelism=1)
    digest = stronger.hash("secret123")

    assert argon2.verify("secret123", digest) is True


@pytest.mark.parametrize(
    "digest",
    [
        "",
        "not-a-hash",
        "plain:secret123",
        "$argon2id$v=19$m=8,t=1,p=1$bad",
        "$argon2id$v=19$m=8,t=1,p=1$c2FsdHNhbHQ$AAAA",
    ],
)
def test_verify_malformed_digest_is_a_mismatch(argon2: Argon2PasswordHasher, digest: str) -> None:
    assert argon2.verify("secret123", digest) is False


def test_verify_truncated_key_is_a_mismatch(argon2: Argon2PasswordHasher) -> None:
    digest = argon2.hash("secret123")
    truncated = digest.rsplit("$", 1)[0] + "$AAAA"

    assert argon2.verify("secret123", truncated) is False


def test_verify_resource_failure_is_internal(
    argon2: Argon2PasswordHasher, monkeypatch: pytest.MonkeyPatch
) -> None:
    def out_of_memory(self: object, hashed: str, password: str) -> bool:
        raise VerificationError("Memory allocation error")

    monkeypatch.setattr(Argon2Library, "verify", out_of_memory)

    with pytest.raises(PasswordHashingError):
        argon2.verify("secret123", "$argon2id$v=19$m=8,t=1,p=1$c2FsdA$aGFzaA")


def test_bounded_hasher_delegates(argon2: Argon2PasswordHasher) -> None:
    bounded = BoundedPasswordHasher(argon2, max_workers=2, timeout=10.0)
    try:
        digest = bounded.hash("secret123")
        assert bounded.verify("secret123", digest) is True
        assert bounded.verify("wrongpass", digest) is False
    finally:
        bounded.shutdown()


class BlockingHasher(PasswordHasher):
    def __init__(self) -> None:
        self.release = threading.Event()

    def hash(self, password: str) -> str:
        self.release.wait(5)
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        self.release.wait(5)
        return hashed == f"hashed:{password}"


def test_bounded_hasher_times_out_when_saturated() -> None:
    inner = BlockingHasher()
    bounded = BoundedPasswordHasher(inner, max_workers=1, timeout=0.1)
    try:
        with pytest.raises(PasswordHashingError):
            bounded.hash("secret123")
    finally:
        inner.release.set()
        bounded.shutdown()


def test_bounded_hasher_after_shutdown_fails_cleanly(argon2: Argon2PasswordHasher) -> None:
    bounded = BoundedPasswordHasher(argon2, max_workers=1, timeout=1.0)
    bounded.shutdown()

    with pytest.raises(PasswordHashingError):
        bounded.hash("secret123")

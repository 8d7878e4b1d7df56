"""Password hashing strategies."""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

from argon2 import PasswordHasher as Argon2Hasher
from argon2 import Type
from argon2.exceptions import (
    HashingError,
    InvalidHashError,
    VerificationError,
    VerifyMismatchError,
)

from userauth.domain.users.exceptions import PasswordHashingError
from userauth.domain.users.repositories import PasswordHasher
from userauth.shared.logging import logger

T = TypeVar("T")

# libargon2 reports every other verification failure as a decoding problem.
_RESOURCE_FAILURES = ("memory allocation", "thread")


def _is_resource_failure(exc: VerificationError) -> bool:
    reason = str(exc).lower()
    return any(marker in reason for marker in _RESOURCE_FAILURES)


class Argon2PasswordHasher(PasswordHasher):
    """Argon2id hasher producing PHC strings (``$argon2id$v=19$m=..,t=..,p=..$salt$key``).

    ``verify`` reads the cost parameters from the stored digest, so digests
    produced under older settings keep verifying after the settings change.

    A digest that cannot be parsed, whether its prefix or its encoded salt and
    key are damaged, verifies as ``False``. Only resource failures inside
    Argon2 (memory allocation, threading) raise ``PasswordHashingError``.
    """

    def __init__(
        self,
        *,
        time_cost: int = 3,
        memory_cost: int = 65536,
        parallelism: int = 4,
    ) -> None:
        self._hasher = Argon2Hasher(
            time_cost=time_cost,
            memory_cost=memory_cost,
            parallelism=parallelism,
            type=Type.ID,
        )

    def hash(self, password: str | bytes) -> str:
        try:
            return self._hasher.hash(password)
        except HashingError as exc:
            raise PasswordHashingError(str(exc)) from exc

    def verify(self, password: str | bytes, hashed: str) -> bool:
        try:
            return self._hasher.verify(hashed, password)
        except (VerifyMismatchError, InvalidHashError, ValueError):
            return False
        except VerificationError as exc:
            if _is_resource_failure(exc):
                raise PasswordHashingError(str(exc)) from exc
            return False


class BoundedPasswordHasher(PasswordHasher):
    """Runs another hasher on a fixed-size worker pool.

    At most ``max_workers`` hash or verify calls execute at once, which caps the
    memory held by Argon2. Callers wait at most ``timeout`` seconds for a slot
    and the result; a call that has not started by then is cancelled.
    """

    def __init__(self, inner: PasswordHasher, *, max_workers: int, timeout: float) -> None:
        self._inner = inner
        self._timeout = timeout
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="password-hash"
        )

    def _run(self, op: str, fn: Callable[..., T], *args: object) -> T:
        try:
            future = self._executor.submit(fn, *args)
        except RuntimeError as exc:
            raise PasswordHashingError(f"password {op} pool is shut down") from exc

        try:
            return future.result(timeout=self._timeout)
        except TimeoutError as exc:
            future.cancel()
            logger.warning(f"password_hash: {op} timed out after {self._timeout:.1f}s")
            raise PasswordHashingError(f"password {op} timed out") from exc

    def hash(self, password: str | bytes) -> str:
        return self._run("hash", self._inner.hash, password)

    def verify(self, password: str | bytes, hashed: str) -> bool:
        return self._run("verify", self._inner.verify, password, hashed)

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait, cancel_futures=True)

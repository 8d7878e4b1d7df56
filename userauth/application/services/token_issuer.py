# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed bearer tokens (JWT, HS256)."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt

from userauth.domain.users.entities import Claims
from userauth.domain.users.exceptions import InvalidTokenError, TokenEncodingError
from userauth.domain.users.repositories import TokenIssuer

TOKEN_LIFETIME = timedelta(hours=4)


class JwtTokenIssuer(TokenIssuer):
    """Stateless issuer: nothing is recorded per token, validity is signature plus expiry."""

    ALGORITHM = "HS256"

    def __init__(self, secret: str, *, lifetime: timedelta = TOKEN_LIFETIME) -> None:
        self._secret = secret
        self._lifetime = lifetime

    def claims_for(self, subject_id: str, now: datetime) -> Claims:
        return Claims(subject=subject_id, issued_at=now, expires_at=now + self._lifetime)

    def issue(self, subject_id: str, now: datetime) -> str:
        if not self._secret:
            raise TokenEncodingError("signing secret is not configured")
        claims = self.claims_for(subject_id, now)
        try:
            return jwt.encode(claims.to_payload(), self._secret, algorithm=self.ALGORITHM)
        except (jwt.PyJWTError, TypeError, ValueError) as exc:
            raise TokenEncodingError(str(exc)) from exc

    def decode(self, token: str) -> Claims:
        """Verify signature and expiry and return the embedded claims."""
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.ALGORITHM],
                options={"require": ["sub", "iat", "exp"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise InvalidTokenError("token expired") from exc
        except jwt.InvalidTokenError as exc:
            raise InvalidTokenError("invalid token") from exc

        return Claims(
            subject=str(payload["sub"]),
            issued_at=datetime.fromtimestamp(payload["iat"], tz=UTC),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=UTC),
        )

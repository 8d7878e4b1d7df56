from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from userauth.application.services.token_issuer import TOKEN_LIFETIME, JwtTokenIssuer
from userauth.domain.users.exceptions import InvalidTokenError, TokenEncodingError

SECRET = "token-secret-0123456789abcdef012345"


def test_issue_embeds_subject_and_four_hour_expiry() -> None:
    now = datetime.now(UTC).replace(microsecond=0)
    issuer = JwtTokenIssuer(SECRET)

    token = issuer.issue("user-42", now)
    payload = jwt.decode(token, SECRET, algorithms=["HS256"])

    assert payload["sub"] == "user-42"
    assert payload["iat"] == int(now.timestamp())
    assert payload["exp"] - payload["iat"] == int(TOKEN_LIFETIME.total_seconds())
    assert TOKEN_LIFETIME == timedelta(hours=4)


def test_decode_round_trips_claims() -> None:
    now = datetime.now(UTC).replace(microsecond=0)
    issuer = JwtTokenIssuer(SECRET)

    claims = issuer.decode(issuer.issue("user-42", now))

    assert claims.subject == "user-42"
    assert claims.issued_at == now
    assert claims.expires_at == now + TOKEN_LIFETIME


def test_decode_rejects_expired_token() -> None:
    issuer = JwtTokenIssuer(SECRET)
    token = issuer.issue("user-42", datetime.now(UTC) - timedelta(hours=5))

    with pytest.raises(InvalidTokenError, match="expired"):
        issuer.decode(token)


def test_decode_rejects_foreign_signature() -> None:
    token = JwtTokenIssuer("another-secret-0123456789abcdef0123").issue(
        "user-42", datetime.now(UTC)
    )

    with pytest.raises(InvalidTokenError, match="invalid"):
        JwtTokenIssuer(SECRET).decode(token)


def test_decode_rejects_garbage() -> None:
    with pytest.raises(InvalidTokenError):
        JwtTokenIssuer(SECRET).decode("not.a.token")


def test_issue_without_secret_fails() -> None:
    with pytest.raises(TokenEncodingError):
        JwtTokenIssuer("").issue("user-42", datetime.now(UTC))

"""Tests for bearer token issuance and verification."""

from datetime import datetime, timedelta, timezone

import pytest
from jose import JWTError, jwt

from reservations_api.api.core.constants import JWT_ALGORITHM
from reservations_api.modules.user.tokens import create_access_token, decode_access_token
from reservations_api.utils.settings.auth import AuthSettings


def test_token_carries_expected_claims():
    settings = AuthSettings()

    token, expires_at = create_access_token("user-1")
    claims = decode_access_token(token)

    assert claims["sub"] == "user-1"
    assert claims["iss"] == settings.JWT_ISSUER
    assert claims["aud"] == settings.JWT_AUDIENCE
    assert claims["exp"] == int(expires_at.timestamp())
    assert claims["exp"] - claims["iat"] == int(
        timedelta(days=settings.JWT_EXPIRE_DAYS).total_seconds()
    )


def test_each_token_has_its_own_id():
    first, _ = create_access_token("user-1")
    second, _ = create_access_token("user-1")

    assert decode_access_token(first)["jti"] != decode_access_token(second)["jti"]


def test_expiry_honours_settings(monkeypatch):
    monkeypatch.setenv("JWT_EXPIRE_DAYS", "3")

    _, expires_at = create_access_token("user-1")

    expected = datetime.now(timezone.utc) + timedelta(days=3)
    assert abs((expires_at - expected).total_seconds()) < 60


def test_tampered_token_is_rejected():
    token, _ = create_access_token("user-1")
    claims = jwt.get_unverified_claims(token)
    claims["sub"] = "user-2"
    forged = jwt.encode(claims, "attacker-secret", algorithm=JWT_ALGORITHM)

    with pytest.raises(JWTError):
        decode_access_token(forged)


def test_garbage_is_rejected():
    with pytest.raises(JWTError):
        decode_access_token("not.a.token")

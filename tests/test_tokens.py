from datetime import timedelta

import pytest
from jose import jwt

from app.security.tokens import (
    InvalidTokenError,
    JWTSettings,
    create_access_token,
    decode_token,
    verify_access_token,
)

SETTINGS = JWTSettings(secret="unit-secret", issuer="blog-api")


def test_issue_then_verify_returns_user_id():
    token = create_access_token(user_id=42, settings=SETTINGS)
    assert verify_access_token(token, SETTINGS) == 42


def test_payload_carries_type_and_expiry():
    decoded = decode_token(create_access_token(user_id=7, settings=SETTINGS), SETTINGS)
    assert decoded["sub"] == "7"
    assert decoded["typ"] == "access"
    assert decoded["exp"] > decoded["iat"]


def test_expired_token_is_rejected():
    expired = JWTSettings(secret="unit-secret", access_ttl=timedelta(seconds=-30))
    token = create_access_token(user_id=1, settings=expired)
    with pytest.raises(InvalidTokenError):
        verify_access_token(token, SETTINGS)


def test_wrong_secret_is_rejected():
    other = JWTSettings(secret="another-secret")
    token = create_access_token(user_id=1, settings=other)
    with pytest.raises(InvalidTokenError):
        verify_access_token(token, SETTINGS)


def test_tampered_token_is_rejected():
    token = create_access_token(user_id=1, settings=SETTINGS)
    header, payload, signature = token.split(".")
    tampered = ".".join([header, payload, signature[::-1]])
    with pytest.raises(InvalidTokenError):
        verify_access_token(tampered, SETTINGS)


def test_wrong_issuer_is_rejected():
    token = create_access_token(user_id=1, settings=JWTSettings(secret="unit-secret", issuer="someone-else"))
    with pytest.raises(InvalidTokenError):
        verify_access_token(token, SETTINGS)


@pytest.mark.parametrize(
    "claims",
    [
        {"iss": "blog-api", "sub": "1", "typ": "refresh"},
        {"iss": "blog-api", "typ": "access"},
        {"iss": "blog-api", "sub": "abc", "typ": "access"},
    ],
)
def test_unexpected_claims_are_rejected(claims):
    token = jwt.encode(claims, "unit-secret", algorithm="HS256")
    with pytest.raises(InvalidTokenError):
        verify_access_token(token, SETTINGS)


def test_garbage_is_rejected():
    with pytest.raises(InvalidTokenError):
        verify_access_token("not-a-jwt", SETTINGS)

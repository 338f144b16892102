from __future__ import annotations

from datetime import datetime, timezone

import jwt
import pytest

from app.infrastructure.security.password_hasher import PasswordHasher
from app.infrastructure.security.token_service import JwtTokenService


SECRET = "test-secret-with-enough-length-0123456789"
NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def test_password_hasher_round_trip():
    hasher = PasswordHasher()
    password_hash = hasher.hash("s3cret!")

    assert password_hash != "s3cret!"
    assert hasher.verify("s3cret!", password_hash) is True
    assert hasher.verify("S3cret!", password_hash) is False


@pytest.mark.parametrize("password_hash", ["", "plain-text", "$2b$broken"])
def test_password_hasher_rejects_unusable_hashes(password_hash):
    assert PasswordHasher().verify("anything", password_hash) is False


def test_session_token_carries_principal_and_id():
    service = JwtTokenService(jwt_secret=SECRET, session_ttl_minutes=30)
    payload = service.create_session_token(principal="alice", now=NOW)

    decoded = service.decode_session_token(token=service.encode_session_token(payload=payload))

    assert decoded == payload


def test_session_tokens_get_distinct_ids():
    service = JwtTokenService(jwt_secret=SECRET, session_ttl_minutes=30)

    first = service.create_session_token(principal="alice", now=NOW)
    second = service.create_session_token(principal="alice", now=NOW)

    assert first.token_id != second.token_id


def test_decode_rejects_other_token_types():
    service = JwtTokenService(jwt_secret=SECRET, session_ttl_minutes=30)
    token = jwt.encode(
        {"sub": "alice", "jti": "x", "type": "access", "iat": 0, "exp": 10},
        SECRET,
        algorithm="HS256",
    )

    with pytest.raises(ValueError):
        service.decode_session_token(token=token)


def test_decode_rejects_bad_signature():
    issuer = JwtTokenService(jwt_secret=SECRET, session_ttl_minutes=30)
    verifier = JwtTokenService(jwt_secret="different-secret-with-enough-length-42", session_ttl_minutes=30)
    token = issuer.encode_session_token(payload=issuer.create_session_token(principal="alice", now=NOW))

    with pytest.raises(ValueError):
        verifier.decode_session_token(token=token)

"""Token Service - issue/verify round trip and every rejection path."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from devconnect.core.domain_types import UserId
from devconnect.core.errors import InvalidTokenError
from devconnect.infrastructure.token_service import TokenService

SECRET = "unit-test-secret-with-enough-bytes-0123456789"


@pytest.fixture
def tokens():
    return TokenService(SECRET, expires_in_seconds=360_000)


def test_issued_token_carries_user_id(tokens):
    user_id = UserId(uuid4())
    token = tokens.issue(user_id)
    payload = jwt.decode(token, SECRET, algorithms=["HS256"])
    assert payload["user"] == {"id": str(user_id)}
    assert payload["exp"] - payload["iat"] == 360_000


def test_verify_returns_user_id(tokens):
    user_id = UserId(uuid4())
    assert tokens.verify(tokens.issue(user_id)) == user_id


def test_verify_rejects_other_secret(tokens):
    other = TokenService("another-secret-with-enough-bytes-987654321")
    with pytest.raises(InvalidTokenError):
        tokens.verify(other.issue(UserId(uuid4())))


def test_verify_rejects_expired(tokens):
    past = datetime.now(timezone.utc) - timedelta(hours=1)
    token = jwt.encode(
        {"user": {"id": str(uuid4())}, "iat": past, "exp": past + timedelta(seconds=1)},
        SECRET, algorithm="HS256",
    )
    with pytest.raises(InvalidTokenError):
        tokens.verify(token)


def test_verify_rejects_payload_without_user(tokens):
    token = jwt.encode({"sub": "someone"}, SECRET, algorithm="HS256")
    with pytest.raises(InvalidTokenError):
        tokens.verify(token)


def test_verify_rejects_garbage(tokens):
    with pytest.raises(InvalidTokenError):
        tokens.verify("garbage")

"""Token Service - signs and verifies the session tokens handed out at registration.

Invariants:
    - Payload shape is {"user": {"id": "<uuid>"}} plus iat/exp claims
    - verify() returns a UserId or raises InvalidTokenError; it never returns None
    - Expired, tampered and structurally wrong tokens are indistinguishable to the caller

Design Decisions:
    - PyJWT with a shared HMAC secret (HS256 by default): single service, no key rotation
"""

import logging
from datetime import datetime, timedelta, timezone

import jwt

from devconnect.config import Settings
from devconnect.core.domain_types import UserId, parse_user_id
from devconnect.core.errors import InvalidTokenError

logger = logging.getLogger(__name__)


class TokenService:
    """Issue and verify signed bearer tokens."""

    def __init__(
        self, secret: str, algorithm: str = "HS256", expires_in_seconds: int = 360_000,
    ):
        self.secret = secret
        self.algorithm = algorithm
        self.expires_in = timedelta(seconds=expires_in_seconds)

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            settings.jwt_secret,
            settings.jwt_algorithm,
            settings.jwt_expires_in_seconds,
        )

    def issue(self, user_id: UserId) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "user": {"id": str(user_id)},
            "iat": now,
            "exp": now + self.expires_in,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> UserId:
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.InvalidTokenError as e:
            logger.info(f"Rejected token: {e}")
            raise InvalidTokenError()

        user = payload.get("user")
        user_id = parse_user_id(user.get("id")) if isinstance(user, dict) else None
        if user_id is None:
            logger.info("Rejected token: payload has no user id")
            raise InvalidTokenError()
        return user_id

"""Auth Guard - FastAPI dependency that turns a bearer token into a UserId.

Invariants:
    - Private routes receive the caller's identity only through get_current_user_id
    - Missing header -> MissingTokenError (401); any verification failure -> InvalidTokenError (401)
    - The guard never touches the database: a token for a deleted user still verifies

Design Decisions:
    - HTTPBearer(auto_error=False): the guard raises our own errors so 401s share
      the standard error envelope instead of FastAPI's default 403
"""

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from devconnect.config import Settings, get_settings
from devconnect.core.domain_types import UserId
from devconnect.core.errors import MissingTokenError
from devconnect.infrastructure.token_service import TokenService

_bearer = HTTPBearer(auto_error=False)


def get_token_service(settings: Settings = Depends(get_settings)) -> TokenService:
    return TokenService.from_settings(settings)


async def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    tokens: TokenService = Depends(get_token_service),
) -> UserId:
    """Verified caller identity for private routes."""
    if credentials is None or not credentials.credentials:
        raise MissingTokenError()
    return tokens.verify(credentials.credentials)

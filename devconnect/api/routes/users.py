"""User Routes - public account registration.

Invariants:
    - POST /api/users returns {"token": ...} on success
    - Validation and duplicate-email failures surface as 400 via the global error handler
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from devconnect.api.auth import get_token_service
from devconnect.config import Settings, get_settings
from devconnect.infrastructure.database import get_db
from devconnect.infrastructure.token_service import TokenService
from devconnect.schemas.user import RegistrationRequest, TokenResponse
from devconnect.services.handle_registration import RegistrationHandlers

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=TokenResponse)
async def register_user(
    body: RegistrationRequest,
    db: AsyncSession = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
    settings: Settings = Depends(get_settings),
):
    """Register a user and return a signed token."""
    handlers = RegistrationHandlers(db, tokens, settings.bcrypt_rounds)
    token = await handlers.register(body.name, body.email, body.password)
    return TokenResponse(token=token)

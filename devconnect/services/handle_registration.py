"""Registration Handler - validates the sign-up form, stores the user, issues a token.

Invariants:
    - Validation runs first; a failed rule has no side effects
    - A taken email (case-insensitive) is rejected before any hashing happens
    - The stored password is a bcrypt hash; plaintext never reaches the database or logs
    - Returns a signed token whose payload carries the new user's id
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from devconnect.core.avatar import gravatar_url
from devconnect.core.domain_types import UserId
from devconnect.core.errors import InputValidationError, UserAlreadyExistsError
from devconnect.core.validate_input import normalize_email, validate_registration
from devconnect.infrastructure.password_hashing import hash_password
from devconnect.infrastructure.token_service import TokenService
from devconnect.models.user import User

logger = logging.getLogger(__name__)


class RegistrationHandlers:
    """Account creation."""

    def __init__(
        self, db: AsyncSession, tokens: TokenService, bcrypt_rounds: int = 10,
    ):
        self.db = db
        self.tokens = tokens
        self.bcrypt_rounds = bcrypt_rounds

    async def register(
        self, name: str | None, email: str | None, password: str | None,
    ) -> str:
        result = validate_registration(name, email, password)
        if not result.ok:
            raise InputValidationError(result.errors)

        email = normalize_email(email)
        existing = await self.db.execute(select(User.id).where(User.email == email))
        if existing.scalar_one_or_none() is not None:
            raise UserAlreadyExistsError()

        user = User(
            name=name.strip(),
            email=email,
            avatar=gravatar_url(email),
            password=await hash_password(password, self.bcrypt_rounds),
        )
        self.db.add(user)
        await self.db.commit()
        logger.info("User registered", extra={"user_id": user.id})

        return self.tokens.issue(UserId(user.id))

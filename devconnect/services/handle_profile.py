"""Profile Handlers - fetch own, upsert, list, fetch by owner, delete account.

Invariants:
    - Caller identity arrives as an explicit UserId argument (never read from request state)
    - upsert validates before touching the database; a failed rule has no side effects
    - upsert writes only fields present in the form (ProfileChanges.as_update())
    - Every returned Profile has its owner (name, avatar) loaded
    - delete_account removes the Profile first, then the User, in one commit

Design Decisions:
    - Existence check and write in upsert are two statements, not an atomic upsert:
      a concurrent first-time upsert for the same user loses on the unique
      constraint and surfaces as DatabaseError (500). Last writer wins on updates.
    - Re-select after insert with populate_existing: the new row's owner must be
      loaded eagerly because async sessions cannot lazy-load on attribute access
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from devconnect.core.domain_types import UserId, parse_user_id
from devconnect.core.errors import (
    ErrorContext, InputValidationError, ProfileNotFoundError,
)
from devconnect.core.profile_changes import build_profile_changes
from devconnect.core.validate_input import validate_profile
from devconnect.models.profile import Profile
from devconnect.models.user import User

logger = logging.getLogger(__name__)


class ProfileHandlers:
    """Profile persistence handlers, one instance per request session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _find_by_owner(self, user_id: UserId) -> Profile | None:
        result = await self.db.execute(
            select(Profile)
            .where(Profile.user_id == user_id)
            .options(selectinload(Profile.user))
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_own(self, user_id: UserId) -> Profile:
        """Profile owned by the caller."""
        profile = await self._find_by_owner(user_id)
        if not profile:
            raise ProfileNotFoundError(
                "There is no profile for this user",
                ErrorContext(user_id=str(user_id)),
            )
        return profile

    async def upsert(self, user_id: UserId, form: dict) -> Profile:
        """Create the caller's profile, or apply a partial update to it."""
        result = validate_profile(form.get("status"), form.get("skills"))
        if not result.ok:
            raise InputValidationError(result.errors)

        changes = build_profile_changes(form).as_update()
        profile = await self._find_by_owner(user_id)

        if profile:
            for name, value in changes.items():
                setattr(profile, name, value)
            await self.db.commit()
            logger.info(
                f"Profile updated ({', '.join(sorted(changes))})",
                extra={"user_id": user_id},
            )
            return profile

        self.db.add(Profile(user_id=user_id, **changes))
        await self.db.commit()
        logger.info("Profile created", extra={"user_id": user_id})
        return await self._find_by_owner(user_id)

    async def list_all(self) -> list[Profile]:
        """Every profile with its owner, oldest first."""
        result = await self.db.execute(
            select(Profile)
            .options(selectinload(Profile.user))
            .order_by(Profile.created_at)
        )
        return list(result.scalars().all())

    async def get_by_user(self, raw_user_id: str) -> Profile:
        """Public lookup by owner id. Malformed ids read as not found."""
        user_id = parse_user_id(raw_user_id)
        if user_id is None:
            raise ProfileNotFoundError()
        profile = await self._find_by_owner(user_id)
        if not profile:
            raise ProfileNotFoundError()
        return profile

    async def delete_account(self, user_id: UserId) -> None:
        """Remove the caller's profile, then the caller's user record."""
        # TODO: remove the user's posts once a posts table exists
        await self.db.execute(delete(Profile).where(Profile.user_id == user_id))
        await self.db.execute(delete(User).where(User.id == user_id))
        await self.db.commit()
        logger.info("Profile and user deleted", extra={"user_id": user_id})

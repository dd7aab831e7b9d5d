"""Profile Routes - own profile, upsert, public listing and lookup, account deletion.

Invariants:
    - /me, POST and DELETE require a bearer token; listing and lookup are public
    - Caller identity is resolved once by the auth guard and passed to the handler
    - Responses are ProfileResponse documents with the owner's name and avatar

Design Decisions:
    - user_id path parameter typed as str: a malformed id must answer
      "Profile not found" (400), not a request validation error
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from devconnect.api.auth import get_current_user_id
from devconnect.core.domain_types import SOCIAL_FIELDS, UserId
from devconnect.infrastructure.database import get_db
from devconnect.models.profile import Profile
from devconnect.schemas.profile import (
    MessageResponse, ProfileForm, ProfileOwner, ProfileResponse, SocialLinks,
)
from devconnect.services.handle_profile import ProfileHandlers

router = APIRouter(prefix="/api/profile", tags=["profile"])


def to_profile_response(profile: Profile) -> ProfileResponse:
    return ProfileResponse(
        id=profile.id,
        user=ProfileOwner(
            id=profile.user.id, name=profile.user.name, avatar=profile.user.avatar,
        ),
        company=profile.company,
        website=profile.website,
        location=profile.location,
        bio=profile.bio,
        status=profile.status,
        skills=profile.skills or [],
        githubusername=profile.githubusername,
        social=SocialLinks(**{name: getattr(profile, name) for name in SOCIAL_FIELDS}),
        created_at=profile.created_at,
    )


@router.get("/me", response_model=ProfileResponse)
async def get_own_profile(
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Current user's profile."""
    profile = await ProfileHandlers(db).get_own(user_id)
    return to_profile_response(profile)


@router.post("", response_model=ProfileResponse)
async def upsert_profile(
    body: ProfileForm,
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Create or update the current user's profile."""
    profile = await ProfileHandlers(db).upsert(user_id, body.model_dump())
    return to_profile_response(profile)


@router.get("", response_model=list[ProfileResponse])
async def list_profiles(db: AsyncSession = Depends(get_db)):
    """All profiles."""
    profiles = await ProfileHandlers(db).list_all()
    return [to_profile_response(p) for p in profiles]


@router.get("/users/{user_id}", response_model=ProfileResponse)
async def get_profile_by_user(
    user_id: str, db: AsyncSession = Depends(get_db),
):
    """Public profile of the given user."""
    profile = await ProfileHandlers(db).get_by_user(user_id)
    return to_profile_response(profile)


@router.delete("", response_model=MessageResponse)
async def delete_profile(
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Delete the current user's profile and account."""
    await ProfileHandlers(db).delete_account(user_id)
    return MessageResponse(msg="User deleted!")

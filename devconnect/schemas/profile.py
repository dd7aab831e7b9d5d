"""Profile Schemas - Pydantic models for the profile form and profile documents.

Invariants:
    - ProfileForm accepts skills as a comma-joined string or a list of strings
    - ProfileResponse.user carries only public owner fields (id, name, avatar)
    - Social links are nested under `social` on the wire, flat in the database

Design Decisions:
    - Every ProfileForm field optional: required-ness is a core validation rule so
      missing status/skills come back in the same field-error list as other failures
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class ProfileForm(BaseModel):
    """Create-or-update profile body. Absent fields are left unchanged."""
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    status: str | None = None
    githubusername: str | None = None
    skills: str | list[str] | None = None
    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None


class ProfileOwner(BaseModel):
    """Public slice of the owning user."""
    id: UUID
    name: str
    avatar: str | None = None


class SocialLinks(BaseModel):
    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None


class ProfileResponse(BaseModel):
    """Profile document joined with its owner."""
    id: UUID
    user: ProfileOwner
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    status: str
    skills: list[str] = Field(default_factory=list)
    githubusername: str | None = None
    social: SocialLinks = Field(default_factory=SocialLinks)
    created_at: datetime


class MessageResponse(BaseModel):
    msg: str

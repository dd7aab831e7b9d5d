"""Profile ORM - per-user extended record (bio, skills, social links).

Invariants:
    - Always belongs to a User (user_id FK), at most one per user (unique)
    - status is non-nullable; skills is a JSON list of trimmed strings
    - Social links are individual nullable columns

Design Decisions:
    - Social links as columns, not one JSON blob: a partial update can set one link
      without rewriting the others
    - user relationship eager-loaded (selectin): every read needs owner name/avatar
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, JSON, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from devconnect.db.base import Base


class Profile(Base):
    """Profile entity - one-to-one companion of a User."""
    __tablename__ = "profiles"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, unique=True,
    )
    company: Mapped[str | None] = mapped_column(String(255), nullable=True)
    website: Mapped[str | None] = mapped_column(String(255), nullable=True)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(255), nullable=False)
    skills: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    githubusername: Mapped[str | None] = mapped_column(
        String(100), nullable=True,
    )

    # Social links
    youtube: Mapped[str | None] = mapped_column(String(255), nullable=True)
    twitter: Mapped[str | None] = mapped_column(String(255), nullable=True)
    facebook: Mapped[str | None] = mapped_column(String(255), nullable=True)
    linkedin: Mapped[str | None] = mapped_column(String(255), nullable=True)
    instagram: Mapped[str | None] = mapped_column(String(255), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    user: Mapped["User"] = relationship("User", lazy="selectin")

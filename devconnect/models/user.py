"""User ORM - persists the account record created at registration.

Invariants:
    - id is UUID primary key (client-side default)
    - email is unique and stored lower-cased
    - password holds a bcrypt hash, never plaintext

Design Decisions:
    - No relationship back to Profile: profiles are always loaded from the profile side
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from devconnect.db.base import Base


class User(Base):
    """Account identity - name, email, hashed password, avatar."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True,
    )
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    avatar: Mapped[str | None] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

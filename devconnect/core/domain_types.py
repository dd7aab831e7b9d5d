"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps a UUID; never pass a bare str identity into handlers
    - Every field name accepted from the profile form is listed exactly once

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Social link names kept as a tuple: the response builder and the change
      record iterate the same sequence
"""

from typing import NewType
from uuid import UUID


# --- Identity Types ----------------------------------------------

UserId = NewType("UserId", UUID)


# --- Field Groups ------------------------------------------------

PROFILE_TEXT_FIELDS: tuple[str, ...] = (
    "company", "website", "location", "bio", "status", "githubusername",
)

SOCIAL_FIELDS: tuple[str, ...] = (
    "youtube", "twitter", "facebook", "linkedin", "instagram",
)


def parse_user_id(raw: str) -> UserId | None:
    """Parse a path/token identifier. None when it is not a well-formed UUID."""
    try:
        return UserId(UUID(str(raw)))
    except (ValueError, AttributeError, TypeError):
        return None

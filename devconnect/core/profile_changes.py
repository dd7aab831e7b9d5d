"""Profile Changes - partial-update record built from a submitted profile form.

Invariants:
    - A field is None when it was not supplied; None NEVER means "clear this field"
    - Empty strings count as not supplied; whitespace is kept as given
    - skills is always a list of trimmed, non-empty strings (or None)
    - build_profile_changes is PURE: no IO, no ORM objects

Design Decisions:
    - Explicit optional-field dataclass over a loose dict: the set of updatable
      columns is visible in one place and typos fail loudly
    - skills accepts the comma-joined string form and the list form
"""

from dataclasses import dataclass, fields

from devconnect.core.domain_types import PROFILE_TEXT_FIELDS, SOCIAL_FIELDS


@dataclass(frozen=True)
class ProfileChanges:
    """Fields to write on upsert. None = leave unchanged."""
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    status: str | None = None
    githubusername: str | None = None
    skills: list[str] | None = None
    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None

    def as_update(self) -> dict:
        """Only the supplied fields, ready to apply to a Profile row."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


def parse_skills(raw: str | list[str] | None) -> list[str] | None:
    """'a, b ,c' -> ['a', 'b', 'c']. Empty entries are dropped."""
    if raw is None:
        return None
    parts = raw.split(",") if isinstance(raw, str) else raw
    skills = [p.strip() for p in parts if isinstance(p, str) and p.strip()]
    return skills or None


def _supplied(value: str | None) -> str | None:
    if not value:
        return None
    return value


def build_profile_changes(form: dict) -> ProfileChanges:
    """Build a ProfileChanges from a submitted form, keeping only supplied fields."""
    values: dict = {
        name: _supplied(form.get(name))
        for name in PROFILE_TEXT_FIELDS + SOCIAL_FIELDS
    }
    values["skills"] = parse_skills(form.get("skills"))
    return ProfileChanges(**values)

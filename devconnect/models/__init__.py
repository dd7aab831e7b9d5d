"""ORM Models - SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - User is the owner; Profile is scoped by user_id

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from devconnect.models.user import User  # noqa: F401
from devconnect.models.profile import Profile  # noqa: F401

"""Service test fixtures - seeded users for handler-level tests.

Invariants:
    - Handlers are exercised directly against the shared in-memory test DB
    - Seeded users carry a placeholder hash; no hashing cost in these tests
"""

import pytest

from devconnect.core.domain_types import UserId
from devconnect.models.user import User


@pytest.fixture
def seed_user(test_db):
    """Insert a user directly into the test DB and return its UserId."""
    async def _seed(name="Jane Dev", email="jane@devmail.io") -> UserId:
        user = User(name=name, email=email, password="$2b$04$placeholder", avatar="//avatar")
        test_db.add(user)
        await test_db.commit()
        return UserId(user.id)
    return _seed

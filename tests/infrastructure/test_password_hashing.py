"""Password Hashing - bcrypt hashes are salted and verifiable."""

from devconnect.infrastructure.password_hashing import (
    hash_password,
    hash_password_sync,
    verify_password_sync,
)


def test_hash_is_not_plaintext_and_verifies():
    hashed = hash_password_sync("secret123", rounds=4)
    assert hashed != "secret123"
    assert hashed.startswith("$2b$04$")
    assert verify_password_sync("secret123", hashed)
    assert not verify_password_sync("secret124", hashed)


def test_hash_is_salted():
    assert hash_password_sync("secret123", rounds=4) != hash_password_sync("secret123", rounds=4)


def test_long_password_hashes_on_first_72_bytes():
    base = "p" * 72
    hashed = hash_password_sync(base + "tail", rounds=4)
    assert verify_password_sync(base, hashed)


async def test_async_hash_runs_off_loop():
    hashed = await hash_password("secret123", rounds=4)
    assert verify_password_sync("secret123", hashed)

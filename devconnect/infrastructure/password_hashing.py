"""Password Hashing - salted bcrypt hashes computed off the event loop.

Invariants:
    - Stored value is a bcrypt hash string, never the plaintext
    - Hashing runs in a worker thread (asyncio.to_thread); the loop never blocks on it

Design Decisions:
    - bcrypt directly over a wrapper framework: one algorithm, one call site
    - Input truncated to 72 bytes: bcrypt ignores the rest and recent releases reject it
"""

import asyncio

import bcrypt


BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password_sync(password: str, rounds: int = 10) -> str:
    return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=rounds)).decode("ascii")


def verify_password_sync(password: str, hashed: str) -> bool:
    return bcrypt.checkpw(_encode(password), hashed.encode("ascii"))


async def hash_password(password: str, rounds: int = 10) -> str:
    return await asyncio.to_thread(hash_password_sync, password, rounds)

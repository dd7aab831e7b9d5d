"""Avatar URL - deterministic Gravatar link derived from an email address."""

import hashlib
from urllib.parse import urlencode


GRAVATAR_BASE_URL = "//www.gravatar.com/avatar/"
AVATAR_SIZE = "200"
AVATAR_RATING = "pg"
AVATAR_DEFAULT = "mm"


def gravatar_url(email: str) -> str:
    """Gravatar hashes the trimmed, lower-cased address."""
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
    query = urlencode({"s": AVATAR_SIZE, "r": AVATAR_RATING, "d": AVATAR_DEFAULT})
    return f"{GRAVATAR_BASE_URL}{digest}?{query}"

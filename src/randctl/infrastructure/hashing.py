"""bcrypt hashing for generated and imported passwords.

bcrypt only looks at the first 72 bytes of its input and current releases
refuse longer passwords outright, so callers must surface a ``ValueError``
from :func:`hash_password` as a hashing failure.
"""

from __future__ import annotations

import bcrypt

DEFAULT_ROUNDS = 10
BCRYPT_MAX_BYTES = 72


def hash_password(password: str, *, rounds: int = DEFAULT_ROUNDS) -> str:
    """Return the bcrypt hash of *password* as text.

    Raises:
        ValueError: If the password exceeds 72 bytes or *rounds* is out of
            bcrypt's accepted range (4 to 31).
    """
    encoded = password.encode("utf-8")
    if len(encoded) > BCRYPT_MAX_BYTES:
        raise ValueError(
            f"password is {len(encoded)} bytes; bcrypt accepts at most {BCRYPT_MAX_BYTES}"
        )
    return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=rounds)).decode("ascii")


def check_password(password: str, hashed: str) -> bool:
    """Return True when *password* matches the bcrypt *hashed* value.

    Raises:
        ValueError: If *hashed* is not a well-formed bcrypt hash.
    """
    encoded = password.encode("utf-8")
    if len(encoded) > BCRYPT_MAX_BYTES:
        return False
    return bcrypt.checkpw(encoded, hashed.encode("ascii"))

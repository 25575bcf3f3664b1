"""Password hashing helpers."""

import bcrypt

# bcrypt only reads the first 72 bytes; newer releases raise past that.
MAX_PASSWORD_BYTES = 72


def _secret(plain: str) -> bytes:
    return plain.encode("utf-8")[:MAX_PASSWORD_BYTES]


def hash_password(plain: str) -> str:
    """Hash a password with a fresh bcrypt salt."""
    return bcrypt.hashpw(_secret(plain), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    """Check a password against a stored bcrypt hash.

    Malformed hashes never match.
    """
    try:
        return bcrypt.checkpw(_secret(plain), hashed.encode("utf-8"))
    except ValueError:
        return False

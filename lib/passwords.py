# =============================================================================
# lib/passwords.py - Password Hashing
# =============================================================================
# bcrypt hashing for stored credentials. Plain-text passwords are never
# written to the database; only the hash produced here is.
#
# Usage:
#   from lib.passwords import hash_password, verify_password
#   stored = hash_password("secret")
#   verify_password("secret", stored)  # True
# =============================================================================

import bcrypt

# bcrypt only looks at the first 72 bytes
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """
    Hash a password with a fresh salt.

    Returns:
        The bcrypt hash as a str, safe to store as-is
    """
    return bcrypt.hashpw(_encode(password), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """
    Check a password against a stored bcrypt hash.

    Returns False (rather than raising) when the stored value isn't a
    bcrypt hash at all.
    """
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
    except ValueError:
        return False

"""
Thoughts API — Credential Helpers
===================================

What:  Password hashing/verification and access token generation.
Why:   Keeps the cryptographic primitives behind three small functions so
       services and models never touch bcrypt or `secrets` directly.
How:   bcrypt with a per-password random salt; tokens come from the OS CSPRNG.

bcrypt only looks at the first 72 bytes of a password (and recent releases
reject longer input), so UserService refuses longer passwords up front.
"""

import logging
import secrets

import bcrypt

from thoughts_api.config import settings

logger = logging.getLogger(__name__)

BCRYPT_MAX_PASSWORD_BYTES = 72

# Tokens are always 128 random bytes (256 hex characters)
ACCESS_TOKEN_BYTES = 128


def hash_password(password: str) -> str:
    """Return a salted bcrypt hash of `password` as a text string."""
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """
    Check `password` against a stored bcrypt hash.

    Returns False (instead of raising) for malformed hashes or oversized
    input, so a corrupt row reads as a failed login rather than a 500.
    """
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        logger.warning("Password verification failed on a malformed hash or input")
        return False


def generate_access_token() -> str:
    """Hex-encoded token from `ACCESS_TOKEN_BYTES` random bytes."""
    return secrets.token_hex(ACCESS_TOKEN_BYTES)

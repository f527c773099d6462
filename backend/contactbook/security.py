"""
Contact Book Backend — Password Hashing
=========================================

What:  Salted one-way password hashing and verification with bcrypt.
Why:   Stored credentials must never be recoverable; bcrypt embeds the salt
       and work factor in the hash string, so verification needs nothing else.
How:   hash_password() → "$2b$10$<salt><digest>"; verify_password() re-hashes
       the candidate with the stored salt and compares in constant time.

Compatibility:
    Hashes written by other bcrypt implementations ("$2a$" prefix) verify
    unchanged.

Both functions are CPU-bound (tens of milliseconds at work factor 10);
async callers run them in a worker thread.
"""

import logging

import bcrypt

from contactbook.config import settings

logger = logging.getLogger(__name__)

# bcrypt ignores everything after the 72nd byte of input
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int | None = None) -> str:
    """Returns a salted bcrypt hash of `password` using the configured work factor."""
    salt = bcrypt.gensalt(rounds=rounds or settings.bcrypt_rounds)
    return bcrypt.hashpw(_encode(password), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """
    Checks `password` against a stored bcrypt hash.

    A malformed stored hash counts as a mismatch rather than an error, so a
    corrupted row reads as "invalid credentials" instead of a server error.
    """
    try:
        return bcrypt.checkpw(_encode(password), hashed.encode("utf-8"))
    except ValueError:
        logger.warning("Stored password hash is not a valid bcrypt hash")
        return False

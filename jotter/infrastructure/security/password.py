"""Password hashing for stored user credentials (bcrypt over a SHA-256 digest).

Bcrypt only reads the first 72 bytes of its input. Passwords may be up to
512 characters, so the bcrypt input is the base64 SHA-256 digest of the
password instead of the raw UTF-8 bytes.
"""

import base64
import hashlib

import bcrypt


def _digest(password: str) -> bytes:
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def get_password_hash(password: str) -> str:
    """Return a salted bcrypt hash of password, suitable for user.password_hash."""
    hashed = bcrypt.hashpw(_digest(password), bcrypt.gensalt())
    return hashed.decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    """Return True if plain_password matches password_hash.

    Malformed hashes are treated as a mismatch.
    """
    try:
        return bool(bcrypt.checkpw(_digest(plain_password), password_hash.encode("utf-8")))
    except (ValueError, TypeError):
        return False

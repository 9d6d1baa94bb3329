"""
Rodrise School Management Backend — Password Hashing
=====================================================

What:  bcrypt hashing and verification for user passwords.
Why:   bcrypt is deliberately slow; the work factor (settings.bcrypt_rounds,
       default 12 → 4096 iterations) makes offline brute force expensive.
Who:   The admin seed script hashes with hash_password(). verify_password()
       is for the session layer that stores the signed-in user under
       templating.SESSION_USER_KEY; sign-in itself lives outside this service.
"""

from typing import Optional

import bcrypt

from app.config import settings


class PasswordHashError(ValueError):
    pass


def hash_password(plain_password: str, rounds: Optional[int] = None) -> str:
    """Hash a plaintext password; the salt and cost are embedded in the result."""
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise PasswordHashError("Password is empty.")
    salt = bcrypt.gensalt(rounds=rounds or settings.bcrypt_rounds)
    return bcrypt.hashpw(password, salt).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    password = (plain_password or "").encode("utf-8")
    hashed = (password_hash or "").encode("utf-8")
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        # Stored value is not a bcrypt hash
        return False

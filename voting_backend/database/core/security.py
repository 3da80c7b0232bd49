"""Password hashing primitives (argon2id)."""

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

password_hasher = PasswordHasher()
"""Hasher producing and checking every stored password digest"""

# digest of a throwaway password, verified against when the email is unknown
_DUMMY_HASH = password_hasher.hash("dummy-password")


def hash_password(password: str) -> str:
    return password_hasher.hash(password)


def verify_password(plain_password: str, hashed_password: str | None) -> bool:
    """
    Check `plain_password` against a stored digest.

    When `hashed_password` is None the dummy digest is verified instead, so
    unknown accounts cost the same as a wrong password.
    """
    try:
        password_hasher.verify(hashed_password or _DUMMY_HASH, plain_password)
    except (VerificationError, InvalidHashError):
        return False
    return hashed_password is not None

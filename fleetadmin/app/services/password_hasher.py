"""
Password hashing with bcrypt.

bcrypt is deliberately slow, so both operations are pushed to a worker
thread to keep the event loop free for other requests.
"""

import asyncio
from typing import Optional

import bcrypt

BCRYPT_MAX_BYTES = 72


class PasswordEncodingError(ValueError):
    """Plaintext cannot be hashed (None, not a string, too long)"""


class CorruptHashError(ValueError):
    """Stored hash is not a valid bcrypt hash"""


def _encode(plaintext: Optional[str]) -> bytes:
    if plaintext is None or not isinstance(plaintext, str):
        raise PasswordEncodingError("Password must be a string")
    return plaintext.encode("utf-8")


def ensure_hashable(plaintext: str) -> str:
    """
    Reject passwords bcrypt cannot hash. The limit is in UTF-8 bytes, not characters.

    Usable as a pydantic validator: PasswordEncodingError is a ValueError.
    """
    if len(_encode(plaintext)) > BCRYPT_MAX_BYTES:
        raise PasswordEncodingError(f"Password must not exceed {BCRYPT_MAX_BYTES} bytes")
    return plaintext


class PasswordHasher:
    """
    Salted, adaptive one-way password hashing.

    Business Rules:
    - Fixed work factor (cost 12 unless configured otherwise)
    - Salt is generated per hash and embedded in the output
    - Verification uses bcrypt's own constant-time comparison
    - A mismatch is False, never an exception
    """

    def __init__(self, rounds: int = 12):
        self.rounds = rounds
        # Verified for unknown identities; built once, off the request path
        self.dummy_hash = self.hash_sync("dummy_password")

    def hash_sync(self, plaintext: str) -> str:
        encoded = ensure_hashable(plaintext).encode("utf-8")
        return bcrypt.hashpw(encoded, bcrypt.gensalt(self.rounds)).decode("utf-8")

    def verify_sync(self, plaintext: str, hashed: str) -> bool:
        encoded = _encode(plaintext)
        if not isinstance(hashed, str) or not hashed:
            raise CorruptHashError("Stored password hash is empty or not a string")
        if len(encoded) > BCRYPT_MAX_BYTES:
            # Nothing longer than the limit was ever hashed
            return False
        try:
            return bcrypt.checkpw(encoded, hashed.encode("utf-8"))
        except ValueError as exc:
            raise CorruptHashError("Stored password hash is malformed") from exc

    async def hash(self, plaintext: str) -> str:
        """
        Hash a plaintext password.

        Raises:
            PasswordEncodingError: plaintext is None, not a string or too long
        """
        return await asyncio.to_thread(self.hash_sync, plaintext)

    async def verify(self, plaintext: str, hashed: str) -> bool:
        """
        Check a plaintext password against a stored hash.

        Raises:
            CorruptHashError: stored hash is malformed
        """
        return await asyncio.to_thread(self.verify_sync, plaintext, hashed)

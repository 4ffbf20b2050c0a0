"""
Credential hashing for passwords and refresh tokens.

Input is reduced to its SHA-256 hex digest before bcrypt so values longer
than bcrypt's 72-byte limit (signed refresh tokens) are hashed in full.
"""

import asyncio
import hashlib
from functools import cached_property

import bcrypt

DEFAULT_ROUNDS = 10


class HashFormatError(ValueError):
    """Raised when a stored digest is not a bcrypt hash."""


def _prehash(plaintext: str) -> bytes:
    return hashlib.sha256(plaintext.encode("utf-8")).hexdigest().encode("ascii")


class CredentialHasher:
    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        self.rounds = rounds

    def hash(self, plaintext: str) -> str:
        digest = bcrypt.hashpw(_prehash(plaintext), bcrypt.gensalt(self.rounds))
        return digest.decode("ascii")

    def verify(self, plaintext: str, digest: str) -> bool:
        """
        Check plaintext against a stored digest.

        Returns False on mismatch.

        Raises:
            HashFormatError: digest is empty or not a bcrypt hash
        """
        if not digest:
            raise HashFormatError("Empty digest")
        try:
            return bcrypt.checkpw(_prehash(plaintext), digest.encode("ascii"))
        except ValueError as exc:
            raise HashFormatError(f"Malformed bcrypt digest: {exc}") from exc

    @cached_property
    def dummy_digest(self) -> str:
        """Digest of a throwaway value, hashed once per hasher at its cost factor."""
        return self.hash("dummy_password")

    def burn_verify(self, plaintext: str) -> bool:
        """Full-cost check against dummy_digest; callers ignore the outcome."""
        return self.verify(plaintext, self.dummy_digest)

    async def hash_async(self, plaintext: str) -> str:
        return await asyncio.to_thread(self.hash, plaintext)

    async def verify_async(self, plaintext: str, digest: str) -> bool:
        return await asyncio.to_thread(self.verify, plaintext, digest)

    async def burn_verify_async(self, plaintext: str) -> bool:
        return await asyncio.to_thread(self.burn_verify, plaintext)

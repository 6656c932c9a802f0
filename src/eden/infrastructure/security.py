"""Credential hashing and token signing.

- :class:`PasswordHasher` wraps a passlib ``CryptContext``; the hash
  format is opaque to callers.
- :class:`TokenSigner` wraps PyJWT with a fixed algorithm and key.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

import jwt
from passlib.context import CryptContext

TOKEN_ALGORITHM = "HS512"


class PasswordHasher:
    """One-way credential hashing."""

    def __init__(self, scheme: str = "pbkdf2_sha256") -> None:
        self._context = CryptContext(schemes=[scheme], deprecated="auto")

    def hash(self, plaintext: str) -> str:
        return self._context.hash(plaintext)

    def verify(self, plaintext: str, hashed: str | None) -> bool:
        """True when *plaintext* matches *hashed*. Malformed hashes never match."""
        if not hashed:
            return False
        try:
            return self._context.verify(plaintext, hashed)
        except ValueError:
            return False


class TokenSigner:
    """Signs and decodes subject/expiration JWTs.

    Args:
        secret_key: HMAC key shared by :meth:`sign` and :meth:`decode`.
        clock: Returns the current aware UTC datetime; injectable for tests.
    """

    def __init__(
        self,
        secret_key: str,
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._secret_key = secret_key
        self._clock = clock or (lambda: datetime.now(UTC))

    def now(self) -> datetime:
        return self._clock()

    def sign(self, subject: str, expires_at: datetime) -> str:
        payload = {"sub": subject, "exp": int(expires_at.timestamp())}
        return jwt.encode(payload, self._secret_key, algorithm=TOKEN_ALGORITHM)

    def decode(self, token: str) -> dict[str, Any]:
        """Verify signature and expiration against the injected clock.

        Raises:
            jwt.ExpiredSignatureError: token past its ``exp``.
            jwt.InvalidTokenError: any other signature or format problem.
        """
        claims: dict[str, Any] = jwt.decode(
            token,
            self._secret_key,
            algorithms=[TOKEN_ALGORITHM],
            options={"verify_exp": False, "require": ["sub", "exp"]},
        )
        if int(claims["exp"]) <= int(self.now().timestamp()):
            raise jwt.ExpiredSignatureError("Signature has expired")
        return claims

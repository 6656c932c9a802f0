"""TokenService: signed, time-bounded identity tokens.

Two issuance variants:

- :meth:`TokenService.issue` is trust-based: the email must belong to a
  registered user; no secret is checked.
- :meth:`TokenService.authenticate` is credential-verified: the password
  must match the stored hash.

Tokens are stateless: subject = the user's email, expiration = issuance
time + 24 hours. There is no server-side revocation.
"""

from __future__ import annotations

import logging
from datetime import timedelta

import jwt

from eden.domain.entities import User
from eden.domain.errors import UnauthorizedError
from eden.services._helpers import (
    database_guard,
    domain_error_result,
    error_result,
    internal_error_result,
    not_found,
)
from eden.services.base import BaseService
from eden.services.result import ServiceResult
from eden.services.telemetry import traced

logger = logging.getLogger(__name__)

TOKEN_LIFETIME_MS = 86_400_000
TOKEN_LIFETIME = timedelta(milliseconds=TOKEN_LIFETIME_MS)


class TokenService(BaseService):
    """Issues and verifies bearer tokens."""

    @traced
    @database_guard("issue_token")
    def issue(self, email: str) -> ServiceResult:
        """Issue a token for a registered email without checking a password."""
        op = "issue_token"
        user = self._find_user(email)
        if user is None:
            return not_found(op, "email", "E-mail passed to create token does not exist")
        return self._sign(op, user)

    @traced
    @database_guard("authenticate")
    def authenticate(self, email: str, password: str) -> ServiceResult:
        """Issue a token only when *password* matches the stored hash."""
        op = "authenticate"
        user = self._find_user(email)
        if user is None:
            return not_found(op, "email", "E-mail passed to create token does not exist")
        if not self._store.hasher.verify(password, user.password):
            logger.warning("Invalid credentials for email: %s", email)
            return domain_error_result(op, UnauthorizedError("Invalid credentials"))
        return self._sign(op, user)

    @traced
    def verify(self, token: str) -> ServiceResult:
        """Check a token's signature and expiration; return its subject."""
        op = "verify_token"
        try:
            claims = self._store.signer.decode(token)
        except jwt.ExpiredSignatureError:
            return error_result(op, "UNAUTHORIZED", "Token has expired")
        except jwt.InvalidTokenError:
            return error_result(op, "UNAUTHORIZED", "Invalid token")
        return ServiceResult(
            ok=True,
            op=op,
            data={"subject": claims["sub"], "expires_at_ms": int(claims["exp"]) * 1000},
        )

    def _find_user(self, email: str) -> User | None:
        with self._store.transaction() as txn:
            return txn.users.find_by_email(email)

    def _sign(self, op: str, user: User) -> ServiceResult:
        signer = self._store.signer
        issued_at = signer.now()
        expires_at = issued_at + TOKEN_LIFETIME
        try:
            token = signer.sign(str(user.email), expires_at)
        except Exception:
            logger.exception("Error generating the JWT token")
            return internal_error_result(op)

        logger.info("Token generated for user %s", user.id)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "token": token,
                "subject": user.email,
                "issued_at_ms": int(issued_at.timestamp() * 1000),
                "expires_at_ms": int(expires_at.timestamp() * 1000),
            },
        )

"""Token Authenticator — issues and verifies stateless signed credentials.

Invariants:
    - Verification is signature + expiry only; no store lookup, no revocation list
    - Payload shape: {"user": {"id": <uuid str>}, "iat": <ts>, "exp": <ts>}
    - Any decode failure (bad signature, malformed, expired, wrong shape) → InvalidCredentialError
    - Missing/empty header → MissingCredentialError

Design Decisions:
    - PyJWT HS256 with a configured secret
    - Finite expiry (jwt_expires_seconds); refresh and revocation are out of scope
    - Clock injectable for issuance so expiry is testable without sleeping
"""

import logging
from collections.abc import Callable, Mapping
from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from devconnector.core.domain_types import IdentityId
from devconnector.core.errors import InvalidCredentialError, MissingCredentialError

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenAuthenticator:
    """Signs tokens for identities and resolves tokens back to identity ids."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_seconds: int = 86_400,
        header_name: str = "x-auth-token",
        clock: Clock = _utcnow,
    ):
        self.secret = secret
        self.algorithm = algorithm
        self.expires_seconds = expires_seconds
        self.header_name = header_name
        self._clock = clock

    def issue(self, owner_id: IdentityId) -> str:
        issued_at = self._clock()
        payload = {
            "user": {"id": str(owner_id)},
            "iat": issued_at,
            "exp": issued_at + timedelta(seconds=self.expires_seconds),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> IdentityId:
        """Decode a raw token string into the embedded owner id."""
        try:
            claims = jwt.decode(
                token, self.secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError:
            raise InvalidCredentialError("expired")
        except jwt.InvalidTokenError as e:
            logger.info(f"Rejected token: {e}")
            raise InvalidCredentialError("invalid")

        user = claims.get("user")
        if not isinstance(user, dict) or "id" not in user:
            raise InvalidCredentialError("malformed")
        try:
            return IdentityId(UUID(str(user["id"])))
        except ValueError:
            raise InvalidCredentialError("malformed")

    def authenticate(self, headers: Mapping[str, str]) -> IdentityId:
        """Extract the credential from request headers and verify it."""
        token = headers.get(self.header_name)
        if not token:
            raise MissingCredentialError()
        return self.verify(token)

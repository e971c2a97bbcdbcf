"""Identity Service — registration, login and identity lookup.

Invariants:
    - Registration and login failures use the {"errors": [...]} shape
    - Login never reveals whether the email or the password was wrong
    - Tokens are issued only by TokenAuthenticator.issue
"""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from devconnector.core.account_fields import (
    gravatar_url, normalize_email, validate_login, validate_registration,
)
from devconnector.core.domain_types import IdentityId
from devconnector.core.errors import (
    FieldError, ResourceNotFoundError, ValidationFailedError,
)
from devconnector.core.tokens import TokenAuthenticator
from devconnector.infrastructure.passwords import hash_password, verify_password
from devconnector.models import Identity

logger = logging.getLogger(__name__)


class IdentityService:
    """Account lifecycle for one request."""

    def __init__(
        self, db: AsyncSession, authenticator: TokenAuthenticator,
        bcrypt_rounds: int = 10,
    ):
        self.db = db
        self.authenticator = authenticator
        self.bcrypt_rounds = bcrypt_rounds

    async def _find_by_email(self, email: str) -> Identity | None:
        result = await self.db.execute(
            select(Identity).where(Identity.email == normalize_email(email)),
        )
        return result.scalar_one_or_none()

    async def register(self, name: str | None, email: str | None, password: str | None) -> str:
        validate_registration(name, email, password)
        if await self._find_by_email(email):
            raise ValidationFailedError([FieldError("User already exists", "email")])

        identity = Identity(
            name=name.strip(),
            email=normalize_email(email),
            password_hash=hash_password(password, self.bcrypt_rounds),
            avatar=gravatar_url(email),
        )
        self.db.add(identity)
        await self.db.commit()
        logger.info("Identity registered", extra={"owner_id": identity.id})
        return self.authenticator.issue(IdentityId(identity.id))

    async def login(self, email: str | None, password: str | None) -> str:
        validate_login(email, password)
        identity = await self._find_by_email(email)
        if not identity or not verify_password(password, identity.password_hash):
            raise ValidationFailedError([FieldError("Invalid credentials")])
        return self.authenticator.issue(IdentityId(identity.id))

    async def get_identity(self, owner_id: UUID) -> Identity:
        identity = await self.db.get(Identity, owner_id)
        if not identity:
            raise ResourceNotFoundError("User", str(owner_id))
        return identity

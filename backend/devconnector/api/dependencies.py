"""Route Dependencies — token authentication and per-request services.

Invariants:
    - get_current_identity is the only place credentials are read from a request
    - The resolved id is attached to request.state.identity_id
    - Authenticator built once per process from settings
"""

import logging
from functools import lru_cache

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from devconnector.config import get_settings
from devconnector.core.domain_types import IdentityId
from devconnector.core.tokens import TokenAuthenticator
from devconnector.infrastructure.database import get_db
from devconnector.services.identity_service import IdentityService
from devconnector.services.post_service import PostService
from devconnector.services.profile_service import ProfileAggregateService

logger = logging.getLogger(__name__)


@lru_cache
def get_authenticator() -> TokenAuthenticator:
    settings = get_settings()
    return TokenAuthenticator(
        secret=settings.signing_secret(),
        algorithm=settings.jwt_algorithm,
        expires_seconds=settings.jwt_expires_seconds,
        header_name=settings.auth_header_name,
    )


async def get_current_identity(
    request: Request,
    authenticator: TokenAuthenticator = Depends(get_authenticator),
) -> IdentityId:
    """Resolve the bearer credential; raises 401 errors on failure."""
    identity_id = authenticator.authenticate(request.headers)
    request.state.identity_id = identity_id
    return identity_id


def get_identity_service(
    db: AsyncSession = Depends(get_db),
    authenticator: TokenAuthenticator = Depends(get_authenticator),
) -> IdentityService:
    return IdentityService(db, authenticator, get_settings().bcrypt_rounds)


def get_profile_service(db: AsyncSession = Depends(get_db)) -> ProfileAggregateService:
    return ProfileAggregateService(db)


def get_post_service(db: AsyncSession = Depends(get_db)) -> PostService:
    return PostService(db)

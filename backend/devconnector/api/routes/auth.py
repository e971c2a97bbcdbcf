"""Auth Routes — resolve the current identity and exchange credentials for a token.

Invariants:
    - GET requires a valid token; POST is public
    - Password hash never serialized
"""

import logging

from fastapi import APIRouter, Depends

from devconnector.api.dependencies import get_current_identity, get_identity_service
from devconnector.core.domain_types import IdentityId
from devconnector.schemas.auth import LoginRequest, TokenResponse
from devconnector.services.identity_service import IdentityService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.get("")
async def get_current_user(
    identity_id: IdentityId = Depends(get_current_identity),
    service: IdentityService = Depends(get_identity_service),
):
    """Return the identity behind the token."""
    identity = await service.get_identity(identity_id)
    return identity.to_public()


@router.post("", response_model=TokenResponse)
async def login(
    body: LoginRequest, service: IdentityService = Depends(get_identity_service),
):
    """Authenticate with email and password, return a token."""
    token = await service.login(body.email, body.password)
    return TokenResponse(token=token)

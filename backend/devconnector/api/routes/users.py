"""User Routes — public registration."""

from fastapi import APIRouter, Depends

from devconnector.api.dependencies import get_identity_service
from devconnector.schemas.auth import RegisterRequest, TokenResponse
from devconnector.services.identity_service import IdentityService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=TokenResponse)
async def register(
    body: RegisterRequest, service: IdentityService = Depends(get_identity_service),
):
    """Register an identity and return its first token."""
    token = await service.register(body.name, body.email, body.password)
    return TokenResponse(token=token)

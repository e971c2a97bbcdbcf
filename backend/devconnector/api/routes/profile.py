"""Profile Routes — the Profile aggregate over HTTP.

Invariants:
    - Mutations always act on the authenticated identity's own profile
    - Public reads (list, by user id) need no token
    - Every mutation echoes the whole updated Profile

Design Decisions:
    - user id taken as str so malformed ids reach the service and become 400, not 422
"""

import logging

from fastapi import APIRouter, Depends

from devconnector.api.dependencies import get_current_identity, get_profile_service
from devconnector.core.domain_types import IdentityId
from devconnector.schemas.profile import EducationCreate, ExperienceCreate, ProfileUpsert
from devconnector.services.profile_service import ProfileAggregateService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/profile", tags=["profile"])


@router.get("/me")
async def get_own_profile(
    identity_id: IdentityId = Depends(get_current_identity),
    service: ProfileAggregateService = Depends(get_profile_service),
):
    profile = await service.get_own_profile(identity_id)
    return profile.to_dict()


@router.get("")
async def list_profiles(
    service: ProfileAggregateService = Depends(get_profile_service),
):
    return [p.to_dict() for p in await service.list_profiles()]


@router.get("/user/{user_id}")
async def get_profile_by_user(
    user_id: str, service: ProfileAggregateService = Depends(get_profile_service),
):
    profile = await service.get_profile(user_id)
    return profile.to_dict()


@router.post("")
async def upsert_profile(
    body: ProfileUpsert,
    identity_id: IdentityId = Depends(get_current_identity),
    service: ProfileAggregateService = Depends(get_profile_service),
):
    """Create or sparse-update the caller's profile."""
    profile = await service.upsert_profile(identity_id, body.to_input())
    return profile.to_dict()


@router.delete("")
async def delete_account(
    identity_id: IdentityId = Depends(get_current_identity),
    service: ProfileAggregateService = Depends(get_profile_service),
):
    """Delete the caller's profile and identity."""
    return await service.delete_own(identity_id)


@router.put("/experience")
async def add_experience(
    body: ExperienceCreate,
    identity_id: IdentityId = Depends(get_current_identity),
    service: ProfileAggregateService = Depends(get_profile_service),
):
    profile = await service.add_experience(identity_id, body.to_input())
    return profile.to_dict()


@router.delete("/experience/{entry_id}")
async def remove_experience(
    entry_id: str,
    identity_id: IdentityId = Depends(get_current_identity),
    service: ProfileAggregateService = Depends(get_profile_service),
):
    profile = await service.remove_experience(identity_id, entry_id)
    return profile.to_dict()


@router.put("/education")
async def add_education(
    body: EducationCreate,
    identity_id: IdentityId = Depends(get_current_identity),
    service: ProfileAggregateService = Depends(get_profile_service),
):
    profile = await service.add_education(identity_id, body.to_input())
    return profile.to_dict()


@router.delete("/education/{entry_id}")
async def remove_education(
    entry_id: str,
    identity_id: IdentityId = Depends(get_current_identity),
    service: ProfileAggregateService = Depends(get_profile_service),
):
    profile = await service.remove_education(identity_id, entry_id)
    return profile.to_dict()

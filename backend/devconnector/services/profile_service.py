"""Profile Aggregate Service — owns the Profile aggregate and its nested-list mutation protocol.

Invariants:
    - Every lookup/mutation of an own profile is scoped to the authenticated owner id
    - Input validated (core/profile_fields.py) before the store is touched
    - Nested lists: head insertion, removal strictly by the entry's own id
    - Failed removal leaves the aggregate unchanged (no write issued)
    - Each mutation is one versioned whole-document write (commit_or_conflict)

Design Decisions:
    - Read-modify-write of the whole Profile row; a concurrent writer that read the same
      version gets ConcurrencyError (409) instead of silently losing an update
    - Public reads treat malformed ids as "not found" (400), never 500
"""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from devconnector.core.domain_types import IdentityId, NestedCollection
from devconnector.core.errors import ProfileNotFoundError, ResourceNotFoundError
from devconnector.core.nested_entries import insert_at_head, remove_by_id
from devconnector.core.profile_fields import (
    build_education_entry, build_experience_entry, build_profile_changes,
    merge_social, validate_profile_input,
)
from devconnector.infrastructure.database import commit_or_conflict
from devconnector.models import Identity, Profile

logger = logging.getLogger(__name__)

NO_OWN_PROFILE = "There is no profile for this user"


class ProfileAggregateService:
    """Profile reads and owner-scoped mutations for one request."""

    def __init__(self, db: AsyncSession):
        self.db = db

    # --- Reads ----------------------------------------------------------------

    async def _find(self, owner_id: UUID) -> Profile | None:
        result = await self.db.execute(
            select(Profile).where(Profile.owner_id == owner_id),
        )
        return result.scalar_one_or_none()

    async def _require_own(self, owner_id: IdentityId) -> Profile:
        profile = await self._find(owner_id)
        if not profile:
            raise ProfileNotFoundError(NO_OWN_PROFILE)
        return profile

    async def get_own_profile(self, owner_id: IdentityId) -> Profile:
        return await self._require_own(owner_id)

    async def get_profile(self, target_id: str) -> Profile:
        """Public lookup by owner id; malformed ids are simply not found."""
        try:
            owner_id = UUID(str(target_id))
        except ValueError:
            raise ProfileNotFoundError()
        profile = await self._find(owner_id)
        if not profile:
            raise ProfileNotFoundError()
        return profile

    async def list_profiles(self) -> list[Profile]:
        result = await self.db.execute(select(Profile))
        return list(result.scalars().all())

    # --- Upsert ---------------------------------------------------------------

    async def upsert_profile(self, owner_id: IdentityId, data: dict) -> Profile:
        """Create the owner's profile, or sparse-update the existing one."""
        validate_profile_input(data)
        changes = build_profile_changes(data)

        profile = await self._find(owner_id)
        if profile is None:
            owner = await self.db.get(Identity, owner_id)
            if owner is None:
                raise ResourceNotFoundError("User", str(owner_id))
            profile = Profile(
                owner=owner,
                skills=changes["skills"],
                social=changes["social"],
                experience=[],
                education=[],
                **changes["fields"],
            )
            self.db.add(profile)
            await commit_or_conflict(self.db, "Profile")
            logger.info("Profile created", extra={"owner_id": owner_id})
            return profile

        for name, value in changes["fields"].items():
            setattr(profile, name, value)
        if changes["skills"] is not None:
            profile.skills = changes["skills"]
        if changes["social"]:
            profile.social = merge_social(profile.social, changes["social"])
        await commit_or_conflict(self.db, "Profile")
        logger.info("Profile updated", extra={"owner_id": owner_id})
        return profile

    # --- Nested collections ---------------------------------------------------

    async def _insert_entry(
        self, owner_id: IdentityId, collection: NestedCollection, entry: dict,
    ) -> Profile:
        profile = await self._require_own(owner_id)
        current = getattr(profile, collection.value) or []
        setattr(profile, collection.value, insert_at_head(current, entry))
        await commit_or_conflict(self.db, "Profile")
        logger.info(
            f"Added {collection.value} entry",
            extra={"owner_id": owner_id, "entry_id": entry["id"]},
        )
        return profile

    async def _remove_entry(
        self, owner_id: IdentityId, collection: NestedCollection, entry_id: str,
    ) -> Profile:
        profile = await self._require_own(owner_id)
        current = getattr(profile, collection.value) or []
        remaining = remove_by_id(current, entry_id, collection.value)
        setattr(profile, collection.value, remaining)
        await commit_or_conflict(self.db, "Profile")
        logger.info(
            f"Removed {collection.value} entry",
            extra={"owner_id": owner_id, "entry_id": entry_id},
        )
        return profile

    async def add_experience(self, owner_id: IdentityId, data: dict) -> Profile:
        entry = build_experience_entry(data)
        return await self._insert_entry(owner_id, NestedCollection.EXPERIENCE, entry)

    async def add_education(self, owner_id: IdentityId, data: dict) -> Profile:
        entry = build_education_entry(data)
        return await self._insert_entry(owner_id, NestedCollection.EDUCATION, entry)

    async def remove_experience(self, owner_id: IdentityId, entry_id: str) -> Profile:
        return await self._remove_entry(owner_id, NestedCollection.EXPERIENCE, entry_id)

    async def remove_education(self, owner_id: IdentityId, entry_id: str) -> Profile:
        return await self._remove_entry(owner_id, NestedCollection.EDUCATION, entry_id)

    # --- Deletion -------------------------------------------------------------

    async def delete_own(self, owner_id: IdentityId) -> dict:
        """Remove the owner's Profile and Identity. Posts are kept."""
        profile = await self._find(owner_id)
        if profile is not None:
            await self.db.delete(profile)
        owner = await self.db.get(Identity, owner_id)
        if owner is not None:
            await self.db.delete(owner)
        await commit_or_conflict(self.db, "Profile")
        logger.info("Identity and profile deleted", extra={"owner_id": owner_id})
        return {"msg": "User deleted"}

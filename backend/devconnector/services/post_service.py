"""Post Service — posts with head-inserted likes and comments.

Invariants:
    - Only the author may delete a post (UnauthorizedError otherwise)
    - One like per identity; unlike requires an existing like
    - Comments removed strictly by the comment's own id, only by their author
    - Malformed post ids are "Post not found" (404), never 500
"""

import logging
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from devconnector.core.account_fields import validate_text
from devconnector.core.domain_types import IdentityId
from devconnector.core.errors import (
    DuplicateActionError, ResourceNotFoundError, UnauthorizedError,
)
from devconnector.core.nested_entries import (
    find_index, insert_at_head, new_entry_id, remove_by_id,
)
from devconnector.infrastructure.database import commit_or_conflict
from devconnector.models import Identity, Post

logger = logging.getLogger(__name__)


class PostService:
    """Post reads and mutations for one request."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _author(self, owner_id: IdentityId) -> Identity:
        identity = await self.db.get(Identity, owner_id)
        if not identity:
            raise ResourceNotFoundError("User", str(owner_id))
        return identity

    async def get_post(self, post_id: str) -> Post:
        try:
            key = UUID(str(post_id))
        except ValueError:
            raise ResourceNotFoundError("Post", str(post_id))
        post = await self.db.get(Post, key)
        if not post:
            raise ResourceNotFoundError("Post", str(post_id))
        return post

    async def list_posts(self) -> list[Post]:
        result = await self.db.execute(select(Post).order_by(Post.date.desc()))
        return list(result.scalars().all())

    async def create_post(self, owner_id: IdentityId, text: str | None) -> Post:
        body = validate_text(text)
        author = await self._author(owner_id)
        post = Post(
            owner_id=author.id, text=body, name=author.name, avatar=author.avatar,
            likes=[], comments=[],
        )
        self.db.add(post)
        await self.db.commit()
        logger.info("Post created", extra={"owner_id": owner_id, "post_id": post.id})
        return post

    async def delete_post(self, owner_id: IdentityId, post_id: str) -> dict:
        post = await self.get_post(post_id)
        if post.owner_id != owner_id:
            raise UnauthorizedError()
        await self.db.delete(post)
        await self.db.commit()
        logger.info("Post removed", extra={"owner_id": owner_id, "post_id": post.id})
        return {"msg": "Post removed"}

    # --- Likes ----------------------------------------------------------------

    async def like(self, owner_id: IdentityId, post_id: str) -> list[dict]:
        post = await self.get_post(post_id)
        if find_index(post.likes, str(owner_id), key="user") >= 0:
            raise DuplicateActionError("Post already liked")
        post.likes = insert_at_head(post.likes, {"user": str(owner_id)})
        await commit_or_conflict(self.db, "Post")
        return post.likes

    async def unlike(self, owner_id: IdentityId, post_id: str) -> list[dict]:
        post = await self.get_post(post_id)
        if find_index(post.likes, str(owner_id), key="user") < 0:
            raise DuplicateActionError("Post has not yet been liked")
        post.likes = remove_by_id(post.likes, str(owner_id), "like", key="user")
        await commit_or_conflict(self.db, "Post")
        return post.likes

    # --- Comments -------------------------------------------------------------

    async def add_comment(
        self, owner_id: IdentityId, post_id: str, text: str | None,
    ) -> list[dict]:
        body = validate_text(text)
        author = await self._author(owner_id)
        post = await self.get_post(post_id)
        comment = {
            "id": new_entry_id(),
            "user": str(owner_id),
            "text": body,
            "name": author.name,
            "avatar": author.avatar,
            "date": datetime.now(timezone.utc).isoformat(),
        }
        post.comments = insert_at_head(post.comments, comment)
        await commit_or_conflict(self.db, "Post")
        return post.comments

    async def remove_comment(
        self, owner_id: IdentityId, post_id: str, comment_id: str,
    ) -> list[dict]:
        post = await self.get_post(post_id)
        index = find_index(post.comments, comment_id)
        if index < 0:
            raise ResourceNotFoundError("Comment", comment_id)
        if post.comments[index].get("user") != str(owner_id):
            raise UnauthorizedError()
        post.comments = remove_by_id(post.comments, comment_id, "comment")
        await commit_or_conflict(self.db, "Post")
        return post.comments

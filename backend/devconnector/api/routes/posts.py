"""Post Routes — posts, likes and comments. All require a token."""

from fastapi import APIRouter, Depends

from devconnector.api.dependencies import get_current_identity, get_post_service
from devconnector.core.domain_types import IdentityId
from devconnector.schemas.post import TextBody
from devconnector.services.post_service import PostService

router = APIRouter(prefix="/api/posts", tags=["posts"])


@router.post("")
async def create_post(
    body: TextBody,
    identity_id: IdentityId = Depends(get_current_identity),
    service: PostService = Depends(get_post_service),
):
    post = await service.create_post(identity_id, body.text)
    return post.to_dict()


@router.get("")
async def list_posts(
    identity_id: IdentityId = Depends(get_current_identity),
    service: PostService = Depends(get_post_service),
):
    return [p.to_dict() for p in await service.list_posts()]


@router.get("/{post_id}")
async def get_post(
    post_id: str,
    identity_id: IdentityId = Depends(get_current_identity),
    service: PostService = Depends(get_post_service),
):
    post = await service.get_post(post_id)
    return post.to_dict()


@router.delete("/{post_id}")
async def delete_post(
    post_id: str,
    identity_id: IdentityId = Depends(get_current_identity),
    service: PostService = Depends(get_post_service),
):
    return await service.delete_post(identity_id, post_id)


@router.put("/like/{post_id}")
async def like_post(
    post_id: str,
    identity_id: IdentityId = Depends(get_current_identity),
    service: PostService = Depends(get_post_service),
):
    return await service.like(identity_id, post_id)


@router.put("/unlike/{post_id}")
async def unlike_post(
    post_id: str,
    identity_id: IdentityId = Depends(get_current_identity),
    service: PostService = Depends(get_post_service),
):
    return await service.unlike(identity_id, post_id)


@router.post("/comment/{post_id}")
async def add_comment(
    post_id: str,
    body: TextBody,
    identity_id: IdentityId = Depends(get_current_identity),
    service: PostService = Depends(get_post_service),
):
    return await service.add_comment(identity_id, post_id, body.text)


@router.delete("/comment/{post_id}/{comment_id}")
async def remove_comment(
    post_id: str,
    comment_id: str,
    identity_id: IdentityId = Depends(get_current_identity),
    service: PostService = Depends(get_post_service),
):
    return await service.remove_comment(identity_id, post_id, comment_id)

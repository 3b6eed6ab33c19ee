"""
ptf_publisher.services.content

Reader-facing content: latest update, archive, post pages and comment submission.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from ptf_publisher.db.models import Comment, CommentStatus, Post, Slide
from ptf_publisher.db.repositories.comments import CommentRepo
from ptf_publisher.db.repositories.posts import PostRepo
from ptf_publisher.db.repositories.slides import SlideRepo
from ptf_publisher.errors import InvalidInputError, NotFoundError
from ptf_publisher.observability.logging import get_logger

log = get_logger(__name__)

NO_UPDATES = "No updates found."
COMMENT_RECEIVED = "Your comment has been submitted for moderation."


@dataclass(frozen=True, slots=True)
class PostPage:
    post: Post
    slides: list[Slide]
    comments: list[Comment]


class ContentService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session
        self._posts = PostRepo(session)
        self._slides = SlideRepo(session)
        self._comments = CommentRepo(session)

    async def latest(self) -> PostPage:
        post = await self._posts.latest()
        if post is None:
            raise NotFoundError(NO_UPDATES)
        return await self._page(post)

    async def archive(self) -> list[Post]:
        return await self._posts.list_newest_first()

    async def post_page(self, post_id: uuid.UUID) -> PostPage:
        post = await self._posts.get(post_id)
        if post is None:
            raise NotFoundError("Post not found")
        return await self._page(post)

    async def submit_comment(
        self, post_id: uuid.UUID, *, author_name: str, comment_text: str
    ) -> Comment:
        author_name, comment_text = author_name.strip(), comment_text.strip()
        if not author_name or not comment_text:
            raise InvalidInputError("Name and comment are both required")
        if await self._posts.get(post_id) is None:
            raise NotFoundError("Post not found")

        comment = await self._comments.create(
            post_id=post_id, author_name=author_name, comment_text=comment_text
        )
        await self._session.commit()
        log.info("comment_submitted", post_id=str(post_id), comment_id=str(comment.id))
        return comment

    async def _page(self, post: Post) -> PostPage:
        return PostPage(
            post=post,
            slides=await self._slides.list_for_post(post.id),
            comments=await self._comments.list_approved_for_post(post.id),
        )


class ModerationService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session
        self._comments = CommentRepo(session)

    async def pending(self) -> list[tuple[Comment, str]]:
        return await self._comments.list_pending_with_post_title()

    async def moderate(self, comment_id: uuid.UUID, status: str) -> Comment:
        if status not in (CommentStatus.approved, CommentStatus.deleted):
            raise InvalidInputError(f"Unsupported moderation status: {status}")
        comment = await self._comments.set_status(comment_id, CommentStatus(status))
        if comment is None:
            raise NotFoundError("Comment not found")
        await self._session.commit()
        log.info("comment_moderated", comment_id=str(comment_id), status=status)
        return comment

"""
ptf_publisher.db.repositories.comments

Repository for `Comment` entities.

Responsibilities:
- Record reader submissions (always pending).
- Serve approved comments per post and the pending moderation queue.
"""

from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ptf_publisher.db.models import Comment, CommentStatus, Post


class CommentRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, *, post_id: uuid.UUID, author_name: str, comment_text: str) -> Comment:
        comment = Comment(
            post_id=post_id,
            author_name=author_name,
            comment_text=comment_text,
            status=CommentStatus.pending,
        )
        self._session.add(comment)
        await self._session.flush()
        return comment

    async def get(self, comment_id: uuid.UUID) -> Comment | None:
        return await self._session.get(Comment, comment_id)

    async def list_approved_for_post(self, post_id: uuid.UUID) -> list[Comment]:
        # Oldest first so the thread reads top-down.
        stmt = (
            select(Comment)
            .where(Comment.post_id == post_id, Comment.status == CommentStatus.approved)
            .order_by(Comment.created_at)
        )
        return list((await self._session.execute(stmt)).scalars().all())

    async def list_pending_with_post_title(self) -> list[tuple[Comment, str]]:
        stmt = (
            select(Comment, Post.title)
            .join(Post, Post.id == Comment.post_id)
            .where(Comment.status == CommentStatus.pending)
            .order_by(Comment.created_at)
        )
        return [(c, title) for c, title in (await self._session.execute(stmt)).all()]

    async def set_status(self, comment_id: uuid.UUID, status: CommentStatus) -> Comment | None:
        comment = await self._session.get(Comment, comment_id)
        if comment is None:
            return None
        comment.status = status
        await self._session.flush()
        return comment

"""
ptf_publisher.db.repositories.posts

Repository for `Post` entities.

Responsibilities:
- Create, fetch and list posts (newest first).
- Delete a post together with its slides and comments.
"""

from __future__ import annotations

import uuid

from sqlalchemy import delete, desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from ptf_publisher.db.models import Comment, Post, Slide


class PostRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, *, title: str, slug: str, description: str | None = None) -> Post:
        post = Post(title=title, slug=slug, description=description)
        self._session.add(post)
        await self._session.flush()
        return post

    async def get(self, post_id: uuid.UUID) -> Post | None:
        return await self._session.get(Post, post_id)

    async def latest(self) -> Post | None:
        stmt = select(Post).order_by(desc(Post.created_at)).limit(1)
        return (await self._session.execute(stmt)).scalar_one_or_none()

    async def list_newest_first(self) -> list[Post]:
        stmt = select(Post).order_by(desc(Post.created_at))
        return list((await self._session.execute(stmt)).scalars().all())

    async def delete(self, post_id: uuid.UUID) -> bool:
        post = await self._session.get(Post, post_id)
        if post is None:
            return False
        await self._session.execute(delete(Slide).where(Slide.post_id == post_id))
        await self._session.execute(delete(Comment).where(Comment.post_id == post_id))
        await self._session.delete(post)
        await self._session.flush()
        return True

"""
ptf_publisher.db.repositories.slides

Repository for `Slide` entities.

Responsibilities:
- Append slides to a post gallery and list them in display order.
- Update audio attachments and display positions.
"""

from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ptf_publisher.db.models import Slide


class SlideRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(
        self,
        *,
        post_id: uuid.UUID,
        image_url: str,
        order_index: int,
        image_key: str | None = None,
    ) -> Slide:
        slide = Slide(
            post_id=post_id,
            image_url=image_url,
            image_key=image_key,
            order_index=order_index,
        )
        self._session.add(slide)
        await self._session.flush()
        return slide

    async def get(self, slide_id: uuid.UUID) -> Slide | None:
        return await self._session.get(Slide, slide_id)

    async def list_for_post(self, post_id: uuid.UUID) -> list[Slide]:
        stmt = (
            select(Slide)
            .where(Slide.post_id == post_id)
            .order_by(Slide.order_index, Slide.created_at)
        )
        return list((await self._session.execute(stmt)).scalars().all())

    async def set_audio(
        self, slide_id: uuid.UUID, *, audio_url: str | None, audio_key: str | None
    ) -> Slide | None:
        slide = await self._session.get(Slide, slide_id)
        if slide is None:
            return None
        slide.audio_url = audio_url
        slide.audio_key = audio_key
        await self._session.flush()
        return slide

    async def set_order_index(self, slide_id: uuid.UUID, order_index: int) -> None:
        slide = await self._session.get(Slide, slide_id)
        if slide is None:
            return
        slide.order_index = order_index
        await self._session.flush()

    async def delete(self, slide: Slide) -> None:
        await self._session.delete(slide)
        await self._session.flush()

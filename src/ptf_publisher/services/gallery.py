"""
ptf_publisher.services.gallery

Admin gallery editing: slide order, slide removal and audio tagging.
"""

from __future__ import annotations

import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from ptf_publisher.db.models import Post, Slide
from ptf_publisher.db.repositories.posts import PostRepo
from ptf_publisher.db.repositories.slides import SlideRepo
from ptf_publisher.errors import InvalidInputError, NotFoundError
from ptf_publisher.observability.logging import get_logger
from ptf_publisher.storage import keys
from ptf_publisher.storage.object_store import ObjectStore

log = get_logger(__name__)

AUDIO_CONTENT_TYPE = "audio/mpeg"


def format_elapsed(seconds: float) -> str:
    """Recorder timer label, e.g. 75 -> "01:15"."""
    total = max(int(seconds), 0)
    return f"{total // 60:02d}:{total % 60:02d}"


class GalleryService:
    def __init__(self, *, session: AsyncSession, store: ObjectStore) -> None:
        self._session = session
        self._store = store
        self._posts = PostRepo(session)
        self._slides = SlideRepo(session)

    async def gallery(self, post_id: uuid.UUID) -> tuple[Post, list[Slide]]:
        post = await self._posts.get(post_id)
        if post is None:
            raise NotFoundError("Post not found")
        return post, await self._slides.list_for_post(post_id)

    async def reorder(
        self, post_id: uuid.UUID, slide_ids: list[uuid.UUID]
    ) -> tuple[Post, list[Slide]]:
        post, current = await self.gallery(post_id)
        if len(set(slide_ids)) != len(slide_ids) or set(slide_ids) != {s.id for s in current}:
            raise InvalidInputError("Order must list every slide of the post exactly once")

        log.info("gallery_reorder", post_id=str(post_id), slides=len(slide_ids))
        for index, slide_id in enumerate(slide_ids):
            await self._slides.set_order_index(slide_id, index)
        await self._session.commit()
        return post, await self._slides.list_for_post(post_id)

    async def delete_slide(self, slide_id: uuid.UUID) -> None:
        slide = await self._get_slide(slide_id)
        post_id = slide.post_id

        stored = [k for k in (slide.image_key, self._audio_key(slide)) if k]
        await self._store.remove(stored)
        await self._slides.delete(slide)

        # Keep positions contiguous so badge numbers stay 1..n.
        for index, remaining in enumerate(await self._slides.list_for_post(post_id)):
            if remaining.order_index != index:
                remaining.order_index = index
        await self._session.commit()
        log.info("slide_deleted", slide_id=str(slide_id), post_id=str(post_id))

    async def upload_audio(
        self, slide_id: uuid.UUID, data: bytes, *, duration_seconds: float | None = None
    ) -> Slide:
        if not data:
            raise InvalidInputError("Recording is empty")
        slide = await self._get_slide(slide_id)
        previous = self._audio_key(slide)

        key = keys.slide_audio_key(slide_id)
        await self._store.upload(key, data, content_type=AUDIO_CONTENT_TYPE)
        updated = await self._slides.set_audio(
            slide_id, audio_url=self._store.public_url(key), audio_key=key
        )
        await self._session.commit()

        if previous and previous != key:
            await self._store.remove([previous])
        log.info(
            "audio_tagged",
            slide_id=str(slide_id),
            bytes=len(data),
            duration=format_elapsed(duration_seconds) if duration_seconds is not None else None,
        )
        return updated

    async def delete_audio(self, slide_id: uuid.UUID) -> Slide:
        slide = await self._get_slide(slide_id)
        key = self._audio_key(slide)
        if key:
            await self._store.remove([key])
        updated = await self._slides.set_audio(slide_id, audio_url=None, audio_key=None)
        await self._session.commit()
        log.info("audio_deleted", slide_id=str(slide_id))
        return updated

    async def _get_slide(self, slide_id: uuid.UUID) -> Slide:
        slide = await self._slides.get(slide_id)
        if slide is None:
            raise NotFoundError("Slide not found")
        return slide

    @staticmethod
    def _audio_key(slide: Slide) -> str | None:
        if slide.audio_key:
            return slide.audio_key
        if slide.audio_url:
            return keys.audio_key_from_url(slide.audio_url)
        return None

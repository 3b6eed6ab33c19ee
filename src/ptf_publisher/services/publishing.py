"""
ptf_publisher.services.publishing

Post publishing workflow (bulk slide upload) and post administration.

Responsibilities:
- Turn a title plus a folder of PNG files into a post with ordered slides.
- List and delete posts, cleaning up their stored media.

Uploads run one at a time in file-name order. Every slide is committed as soon as
its image is stored, so a failure part-way keeps the slides already uploaded and
the admin retries the rest by hand.
"""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from ptf_publisher.db.models import Post, Slide
from ptf_publisher.db.repositories.posts import PostRepo
from ptf_publisher.db.repositories.slides import SlideRepo
from ptf_publisher.errors import InvalidInputError, NotFoundError
from ptf_publisher.observability.logging import get_logger
from ptf_publisher.storage import keys
from ptf_publisher.storage.object_store import ObjectStore

log = get_logger(__name__)

PNG_CONTENT_TYPE = "image/png"

_DIGITS = re.compile(r"(\d+)")


@dataclass(frozen=True, slots=True)
class ImageFile:
    name: str
    content_type: str
    data: bytes


def slugify(title: str) -> str:
    slug = title.lower().replace(" ", "-")
    return re.sub(r"[^\w-]+", "", slug, flags=re.ASCII)


def natural_key(name: str) -> tuple[str | int, ...]:
    # "slide2.png" sorts before "slide10.png". re.split with a capture group
    # alternates text/number, so element types line up between any two keys.
    parts = _DIGITS.split(name)
    return tuple(int(p) if i % 2 else p.casefold() for i, p in enumerate(parts))


def png_only(files: list[ImageFile]) -> list[ImageFile]:
    return [f for f in files if f.content_type == PNG_CONTENT_TYPE]


class PublishingService:
    def __init__(self, *, session: AsyncSession, store: ObjectStore) -> None:
        self._session = session
        self._store = store
        self._posts = PostRepo(session)
        self._slides = SlideRepo(session)

    async def create_post_with_slides(
        self,
        *,
        title: str,
        files: list[ImageFile],
        description: str | None = None,
    ) -> tuple[Post, list[Slide]]:
        title = title.strip()
        images = sorted(png_only(files), key=lambda f: natural_key(f.name))
        if not title or not images:
            raise InvalidInputError("Please provide a title and select a folder with PNGs.")

        post = await self._posts.create(title=title, slug=slugify(title), description=description)
        await self._session.commit()
        log.info("upload_started", post_id=str(post.id), images=len(images))

        slides: list[Slide] = []
        for i, image in enumerate(images):
            key = keys.slide_image_key(post.id, i)
            await self._store.upload(key, image.data, content_type=PNG_CONTENT_TYPE)
            slide = await self._slides.create(
                post_id=post.id,
                image_url=self._store.public_url(key),
                image_key=key,
                order_index=i,
            )
            await self._session.commit()
            slides.append(slide)
            log.info("upload_slide", post_id=str(post.id), slide=i + 1, total=len(images))

        return post, slides

    async def list_posts(self) -> list[Post]:
        return await self._posts.list_newest_first()

    async def delete_post(self, post_id: uuid.UUID) -> None:
        post = await self._posts.get(post_id)
        if post is None:
            raise NotFoundError("Post not found")

        slides = await self._slides.list_for_post(post_id)
        audio = [s.audio_key or keys.audio_key_from_url(s.audio_url) for s in slides if s.audio_url]
        await self._store.remove(audio)
        removed = await self._store.remove_prefix(keys.post_prefix(post_id))

        await self._posts.delete(post_id)
        await self._session.commit()
        log.info("post_deleted", post_id=str(post_id), images=removed, audio=len(audio))

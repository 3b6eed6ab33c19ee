"""
ptf_publisher.services.broadcast

Email broadcast of a post to every subscriber.

Responsibilities:
- Render the announcement once per broadcast.
- Split recipients into BCC batches and send them one after another with a
  fixed pause in between (relay rate limits).
"""

from __future__ import annotations

import asyncio
import uuid
from collections.abc import Iterator
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from ptf_publisher.db.repositories.posts import PostRepo
from ptf_publisher.db.repositories.subscribers import SubscriberRepo
from ptf_publisher.errors import NotFoundError
from ptf_publisher.mail.sender import MailSender
from ptf_publisher.mail.templates import post_url, render_broadcast
from ptf_publisher.observability.logging import get_logger
from ptf_publisher.settings import Settings

log = get_logger(__name__)

NO_SUBSCRIBERS = "No subscribers found"


def batched(items: list[str], size: int) -> Iterator[list[str]]:
    for start in range(0, len(items), size):
        yield items[start : start + size]


class BroadcastService:
    def __init__(self, *, session: AsyncSession, settings: Settings, sender: MailSender) -> None:
        self._settings = settings
        self._sender = sender
        self._posts = PostRepo(session)
        self._subscribers = SubscriberRepo(session)

    async def broadcast(
        self, *, post_id: str, title: str, content: str | None, origin: str
    ) -> dict[str, Any]:
        emails = await self._subscribers.list_emails()
        if not emails:
            return {"message": NO_SUBSCRIBERS}

        html = render_broadcast(
            site_name=self._settings.site_name,
            title=title,
            content=content,
            url=post_url(origin, post_id),
        )
        batches = list(batched(emails, self._settings.broadcast_batch_size))
        log.info("broadcast_started", title=title, subscribers=len(emails), batches=len(batches))

        for number, batch in enumerate(batches, start=1):
            if number > 1:
                await asyncio.sleep(self._settings.broadcast_batch_pause_seconds)
            await self._sender.send_batch(subject=title, html=html, bcc=batch)
            log.info("broadcast_batch", batch=number, recipients=len(batch))

        return {"success": True, "count": len(emails)}

    async def broadcast_post(self, post_id: uuid.UUID, *, origin: str) -> dict[str, Any]:
        post = await self._posts.get(post_id)
        if post is None:
            raise NotFoundError("Post not found")
        log.info("broadcast_triggered", post_id=str(post_id))
        return await self.broadcast(
            post_id=str(post.id), title=post.title, content=post.description or "", origin=origin
        )

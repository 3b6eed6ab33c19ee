"""
ptf_publisher.services.subscribers

Broadcast audience management.

Responsibilities:
- List, add and remove subscribers.
- Validate and lowercase addresses; reject duplicates with a conflict.
"""

from __future__ import annotations

import uuid

from email_validator import EmailNotValidError, validate_email
from sqlalchemy.ext.asyncio import AsyncSession

from ptf_publisher.db.models import Subscriber
from ptf_publisher.db.repositories.subscribers import SubscriberRepo
from ptf_publisher.errors import ConflictError, InvalidInputError, NotFoundError
from ptf_publisher.observability.logging import get_logger

log = get_logger(__name__)


def normalize_email(email: str) -> str:
    try:
        return validate_email(email.strip(), check_deliverability=False).normalized.lower()
    except EmailNotValidError as e:
        raise InvalidInputError(str(e)) from e


class SubscriberService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session
        self._subscribers = SubscriberRepo(session)

    async def list(self) -> list[Subscriber]:
        return await self._subscribers.list_newest_first()

    async def add(self, *, name: str, email: str) -> Subscriber:
        name = name.strip()
        if not name:
            raise InvalidInputError("Supporter name is required")
        email = normalize_email(email)
        if await self._subscribers.get_by_email(email) is not None:
            raise ConflictError(f"{email} is already subscribed")

        sub = await self._subscribers.create(name=name, email=email)
        await self._session.commit()
        log.info("subscriber_added", subscriber_id=str(sub.id))
        return sub

    async def delete(self, subscriber_id: uuid.UUID) -> None:
        if not await self._subscribers.delete(subscriber_id):
            raise NotFoundError("Subscriber not found")
        await self._session.commit()
        log.info("subscriber_deleted", subscriber_id=str(subscriber_id))

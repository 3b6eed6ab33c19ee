from __future__ import annotations

import uuid

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from ptf_publisher.db.models import Subscriber


class SubscriberRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, *, name: str, email: str) -> Subscriber:
        sub = Subscriber(name=name, email=email)
        self._session.add(sub)
        await self._session.flush()
        return sub

    async def get_by_email(self, email: str) -> Subscriber | None:
        stmt = select(Subscriber).where(Subscriber.email == email)
        return (await self._session.execute(stmt)).scalar_one_or_none()

    async def list_newest_first(self) -> list[Subscriber]:
        stmt = select(Subscriber).order_by(desc(Subscriber.created_at))
        return list((await self._session.execute(stmt)).scalars().all())

    async def list_emails(self) -> list[str]:
        stmt = select(Subscriber.email).order_by(Subscriber.created_at)
        return list((await self._session.execute(stmt)).scalars().all())

    async def delete(self, subscriber_id: uuid.UUID) -> bool:
        sub = await self._session.get(Subscriber, subscriber_id)
        if sub is None:
            return False
        await self._session.delete(sub)
        await self._session.flush()
        return True

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ptf_publisher.db.models import AdminUser


class AdminUserRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, *, email: str, password_hash: str) -> AdminUser:
        admin = AdminUser(email=email, password_hash=password_hash)
        self._session.add(admin)
        await self._session.flush()
        return admin

    async def get_by_email(self, email: str) -> AdminUser | None:
        stmt = select(AdminUser).where(AdminUser.email == email)
        return (await self._session.execute(stmt)).scalar_one_or_none()

"""
ptf_publisher.services.accounts

Dashboard accounts: password login and first-run admin bootstrap.
"""

from __future__ import annotations

from datetime import timedelta

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ptf_publisher.auth.jwt import JwtConfig, issue_token
from ptf_publisher.auth.models import ADMIN_ROLE
from ptf_publisher.auth.passwords import hash_password, verify_password
from ptf_publisher.db.repositories.admins import AdminUserRepo
from ptf_publisher.db.session import session_scope
from ptf_publisher.errors import AuthenticationError
from ptf_publisher.observability.logging import get_logger
from ptf_publisher.settings import Settings

log = get_logger(__name__)


class AccountService:
    def __init__(self, *, session: AsyncSession, settings: Settings) -> None:
        self._settings = settings
        self._admins = AdminUserRepo(session)

    async def login(self, *, email: str, password: str) -> str:
        email = email.strip().lower()
        log.info("login_attempt", email=email)
        admin = await self._admins.get_by_email(email)
        if admin is None or not verify_password(password, admin.password_hash):
            raise AuthenticationError("Login failed: Invalid login credentials")

        log.info("login_succeeded", email=email)
        return issue_token(
            cfg=JwtConfig.from_settings(self._settings),
            subject=admin.email,
            roles=[ADMIN_ROLE],
            ttl=timedelta(minutes=self._settings.jwt_ttl_minutes),
        )


async def bootstrap_admin(
    session_factory: async_sessionmaker[AsyncSession], settings: Settings
) -> None:
    if not settings.admin_email or not settings.admin_password:
        return
    email = settings.admin_email.strip().lower()
    async with session_scope(session_factory) as session:
        admins = AdminUserRepo(session)
        if await admins.get_by_email(email) is not None:
            return
        await admins.create(email=email, password_hash=hash_password(settings.admin_password))
        await session.commit()
    log.info("admin_bootstrapped", email=email)

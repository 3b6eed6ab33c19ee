"""
ptf_publisher.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for settings, DB sessions, the object store and
  the mail sender.
- Encapsulate app.state access patterns.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ptf_publisher.mail.sender import MailSender
from ptf_publisher.settings import Settings
from ptf_publisher.storage.object_store import ObjectStore


def settings_dep(request: Request) -> Settings:
    # The app is built with an explicit Settings object (see `create_app`).
    return request.app.state.settings


def sessionmaker_from_app(request: Request) -> async_sessionmaker[AsyncSession]:
    return request.app.state.sessionmaker


async def db_session(
    session_factory: async_sessionmaker[AsyncSession] = Depends(sessionmaker_from_app),
) -> AsyncIterator[AsyncSession]:
    # Request-scoped DB session. Commit/rollback is managed explicitly by the service layer.
    async with session_factory() as session:
        yield session


def object_store_dep(request: Request) -> ObjectStore:
    return request.app.state.object_store


def mail_sender_dep(request: Request) -> MailSender:
    return request.app.state.mail_sender


def request_origin(request: Request) -> str:
    # Broadcast links point at the page that triggered them, like a browser Origin header.
    return request.headers.get("origin") or str(request.base_url).rstrip("/")

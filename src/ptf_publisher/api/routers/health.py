"""
ptf_publisher.api.routers.health

Health, readiness and version endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`).
- Provide readiness probe (`/readyz`) with DB connectivity validation.
- Report the release label shown in the site footer (`/v1/meta`).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from ptf_publisher.api.deps import db_session, settings_dep
from ptf_publisher.settings import Settings

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(session: AsyncSession = Depends(db_session)) -> dict[str, str]:
    await session.execute(text("SELECT 1"))
    return {"status": "ready"}


@router.get("/v1/meta")
async def meta(settings: Settings = Depends(settings_dep)) -> dict[str, str]:
    return {"service": settings.service_name, "version": settings.app_version}

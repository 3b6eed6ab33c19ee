"""
ptf_publisher.api.routers.auth

Dashboard sign-in/out.

Responsibilities:
- Exchange email + password for a bearer token.
- Tell the front end where to navigate after signing in or out.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ptf_publisher.api.deps import db_session, settings_dep
from ptf_publisher.api.schemas import LoginIn, NavigationOut, TokenOut
from ptf_publisher.auth.deps import require_admin
from ptf_publisher.auth.models import Principal
from ptf_publisher.navigation.routes import ADMIN_HOME, HOME, normalize
from ptf_publisher.services.accounts import AccountService
from ptf_publisher.settings import Settings

router = APIRouter(prefix="/v1/auth", tags=["auth"])


@router.post("/login", response_model=TokenOut)
async def login(
    body: LoginIn,
    session: AsyncSession = Depends(db_session),
    settings: Settings = Depends(settings_dep),
) -> TokenOut:
    token = await AccountService(session=session, settings=settings).login(
        email=body.email, password=body.password
    )
    # A successful login always lands on the dashboard.
    return TokenOut(access_token=token, redirect=ADMIN_HOME)


@router.get("/me")
async def me(principal: Principal = Depends(require_admin)) -> dict[str, object]:
    return {"email": principal.subject, "roles": sorted(principal.roles)}


@router.post("/logout", response_model=NavigationOut)
async def logout(
    fragment: str = Query(default=""),
    _: Principal = Depends(require_admin),
) -> NavigationOut:
    return NavigationOut(fragment=normalize(fragment), redirect=HOME)

"""
ptf_publisher.api.routers.navigation

Fragment routing endpoint for the front end.

Responsibilities:
- Resolve a location fragment into a view or a redirect.
- Treat the caller as signed in only when it presents an admin token.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from ptf_publisher.api.deps import settings_dep
from ptf_publisher.api.schemas import NavigationOut
from ptf_publisher.auth.deps import get_optional_principal
from ptf_publisher.auth.models import Principal
from ptf_publisher.navigation.routes import resolve_route
from ptf_publisher.settings import Settings

router = APIRouter(prefix="/v1/navigation", tags=["navigation"])


@router.get("", response_model=NavigationOut)
async def navigate(
    fragment: str = Query(default=""),
    principal: Principal | None = Depends(get_optional_principal),
    settings: Settings = Depends(settings_dep),
) -> NavigationOut:
    decision = resolve_route(
        fragment,
        authenticated=principal is not None and principal.is_admin,
        admin_secret=settings.admin_route_secret,
    )
    return NavigationOut(
        fragment=decision.fragment,
        view=decision.view.value if decision.view else None,
        params=decision.params,
        redirect=decision.redirect,
    )

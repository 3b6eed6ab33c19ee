"""
ptf_publisher.navigation.routes

Resolve a location fragment (`#home`, `#post/<id>`, `#admin/posts`, ...) into
the view the front end should show, or the fragment it should move to instead.

Public fragments:
    home, archive, post/<id>
Admin fragments:
    <admin route secret>          login form, or the dashboard when signed in
    admin/posts | subscribers | comments
    admin/edit/<post_id>
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from ptf_publisher.observability.logging import get_logger

log = get_logger(__name__)

HOME = "home"
ADMIN_HOME = "admin/posts"


class View(StrEnum):
    home = "home"
    archive = "archive"
    post = "post"
    admin_login = "admin-login"
    admin_posts = "admin-posts"
    admin_edit = "admin-edit"
    admin_subscribers = "admin-subscribers"
    admin_comments = "admin-comments"


_ADMIN_SECTIONS = {
    "posts": View.admin_posts,
    "subscribers": View.admin_subscribers,
    "comments": View.admin_comments,
}


@dataclass(frozen=True, slots=True)
class RouteDecision:
    fragment: str
    view: View | None = None
    params: dict[str, str] = field(default_factory=dict)
    redirect: str | None = None

    @classmethod
    def show(cls, fragment: str, view: View, **params: str) -> RouteDecision:
        return cls(fragment=fragment, view=view, params=params)

    @classmethod
    def go(cls, fragment: str, target: str) -> RouteDecision:
        return cls(fragment=fragment, redirect=target)


def normalize(fragment: str | None) -> str:
    return (fragment or "").lstrip("#").strip() or HOME


def resolve_route(
    fragment: str | None, *, authenticated: bool, admin_secret: str = "admin-portal"
) -> RouteDecision:
    frag = normalize(fragment)

    if frag == HOME:
        return RouteDecision.show(frag, View.home)
    if frag == "archive":
        return RouteDecision.show(frag, View.archive)
    if frag.startswith("post/"):
        post_id = frag.split("/")[1]
        if post_id:
            return RouteDecision.show(frag, View.post, post_id=post_id)
    elif frag == admin_secret:
        if authenticated:
            return RouteDecision.go(frag, ADMIN_HOME)
        return RouteDecision.show(frag, View.admin_login)
    elif frag.startswith("admin/"):
        if not authenticated:
            log.warning("admin_access_without_session", fragment=frag)
            return RouteDecision.go(frag, admin_secret)
        return _resolve_admin(frag)

    log.warning("route_unrecognized", fragment=frag)
    return RouteDecision.go(frag, HOME)


def _resolve_admin(frag: str) -> RouteDecision:
    parts = frag.split("/")
    section = parts[1]
    if section in _ADMIN_SECTIONS:
        return RouteDecision.show(frag, _ADMIN_SECTIONS[section])
    if section == "edit" and len(parts) > 2 and parts[2]:
        return RouteDecision.show(frag, View.admin_edit, post_id=parts[2])
    return RouteDecision.go(frag, ADMIN_HOME)


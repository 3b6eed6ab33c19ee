from __future__ import annotations

import httpx
import pytest

from ptf_publisher.navigation.routes import View, resolve_route


@pytest.mark.parametrize("fragment", ["", None, "#", "home", "#home"])
def test_empty_and_home_fragments_show_home(fragment) -> None:
    decision = resolve_route(fragment, authenticated=False)
    assert decision.view is View.home
    assert decision.redirect is None


def test_archive_and_post_routes() -> None:
    assert resolve_route("archive", authenticated=False).view is View.archive

    decision = resolve_route("#post/42", authenticated=False)
    assert decision.view is View.post
    assert decision.params == {"post_id": "42"}


def test_unknown_fragment_redirects_home() -> None:
    decision = resolve_route("nowhere", authenticated=True)
    assert decision.view is None
    assert decision.redirect == "home"


def test_post_without_id_redirects_home() -> None:
    # No post page can be loaded for an empty id.
    assert resolve_route("post/", authenticated=False).redirect == "home"


def test_admin_portal_depends_on_session() -> None:
    assert resolve_route("admin-portal", authenticated=False).view is View.admin_login
    assert resolve_route("admin-portal", authenticated=True).redirect == "admin/posts"


def test_admin_routes_require_session() -> None:
    decision = resolve_route("admin/subscribers", authenticated=False)
    assert decision.redirect == "admin-portal"


def test_admin_sections() -> None:
    assert resolve_route("admin/posts", authenticated=True).view is View.admin_posts
    assert resolve_route("admin/comments", authenticated=True).view is View.admin_comments

    edit = resolve_route("admin/edit/abc", authenticated=True)
    assert edit.view is View.admin_edit
    assert edit.params == {"post_id": "abc"}

    assert resolve_route("admin/bogus", authenticated=True).redirect == "admin/posts"


def test_custom_admin_secret() -> None:
    assert resolve_route("admin-portal", authenticated=False, admin_secret="door").redirect == "home"
    assert resolve_route("door", authenticated=False, admin_secret="door").view is View.admin_login
    assert (
        resolve_route("admin/posts", authenticated=False, admin_secret="door").redirect == "door"
    )


@pytest.mark.asyncio
async def test_navigation_endpoint_uses_token(
    client: httpx.AsyncClient, admin: dict[str, str]
) -> None:
    r = await client.get("/v1/navigation", params={"fragment": "admin/posts"})
    assert r.json()["redirect"] == "admin-portal"

    r = await client.get("/v1/navigation", params={"fragment": "admin/posts"}, headers=admin)
    assert r.json()["view"] == "admin-posts"

    # A stale token on a public route is just treated as signed out.
    r = await client.get(
        "/v1/navigation",
        params={"fragment": "admin-portal"},
        headers={"Authorization": "Bearer not-a-token"},
    )
    assert r.json()["view"] == "admin-login"

"""
tests.test_content

Reader pages and the comment moderation loop.
"""

from __future__ import annotations

import uuid

import httpx
import pytest

from tests.conftest import create_post


@pytest.mark.asyncio
async def test_home_without_posts(client: httpx.AsyncClient) -> None:
    r = await client.get("/v1/posts/latest")
    assert r.status_code == 404
    assert r.json()["detail"] == "No updates found."


@pytest.mark.asyncio
async def test_latest_and_archive_are_newest_first(
    client: httpx.AsyncClient, admin: dict[str, str]
) -> None:
    await create_post(client, admin, "May 2026 Update", ["1.png"])
    june = await create_post(client, admin, "June 2026 Update", ["1.png", "2.png"])

    latest = (await client.get("/v1/posts/latest")).json()
    assert latest["post"]["id"] == june["post"]["id"]
    assert len(latest["slides"]) == 2

    archive = (await client.get("/v1/posts")).json()
    assert [p["title"] for p in archive] == ["June 2026 Update", "May 2026 Update"]


@pytest.mark.asyncio
async def test_unknown_post_is_404(client: httpx.AsyncClient) -> None:
    r = await client.get(f"/v1/posts/{uuid.uuid4()}")
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_comment_flow(client: httpx.AsyncClient, admin: dict[str, str]) -> None:
    created = await create_post(client, admin, "Harvest", ["1.png"])
    post_id = created["post"]["id"]

    for author, text in [("Ruth", "Praying for you"), ("Spam Bot", "buy now")]:
        r = await client.post(
            f"/v1/posts/{post_id}/comments", json={"author_name": author, "comment_text": text}
        )
        assert r.status_code == 201
        assert r.json()["message"] == "Your comment has been submitted for moderation."

    # Nothing is public until approved.
    assert (await client.get(f"/v1/posts/{post_id}")).json()["comments"] == []

    queue = (await client.get("/v1/admin/comments/pending", headers=admin)).json()
    assert [c["author_name"] for c in queue] == ["Ruth", "Spam Bot"]
    assert {c["post_title"] for c in queue} == {"Harvest"}

    ruth, bot = queue
    r = await client.put(
        f"/v1/admin/comments/{ruth['id']}/status", json={"status": "approved"}, headers=admin
    )
    assert r.status_code == 200
    r = await client.put(
        f"/v1/admin/comments/{bot['id']}/status", json={"status": "deleted"}, headers=admin
    )
    assert r.json()["status"] == "deleted"

    page = (await client.get(f"/v1/posts/{post_id}")).json()
    assert [c["comment_text"] for c in page["comments"]] == ["Praying for you"]
    assert (await client.get("/v1/admin/comments/pending", headers=admin)).json() == []


@pytest.mark.asyncio
async def test_comment_validation(client: httpx.AsyncClient, admin: dict[str, str]) -> None:
    created = await create_post(client, admin, "Rules", ["1.png"])
    url = f"/v1/posts/{created['post']['id']}/comments"

    r = await client.post(url, json={"author_name": "   ", "comment_text": "hi"})
    assert r.status_code == 400
    r = await client.post(url, json={"author_name": "Ann"})
    assert r.status_code == 422
    r = await client.post(
        f"/v1/posts/{uuid.uuid4()}/comments", json={"author_name": "Ann", "comment_text": "hi"}
    )
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_moderation_rejects_other_statuses(
    client: httpx.AsyncClient, admin: dict[str, str]
) -> None:
    r = await client.put(
        f"/v1/admin/comments/{uuid.uuid4()}/status", json={"status": "pending"}, headers=admin
    )
    assert r.status_code == 422
    r = await client.put(
        f"/v1/admin/comments/{uuid.uuid4()}/status", json={"status": "approved"}, headers=admin
    )
    assert r.status_code == 404

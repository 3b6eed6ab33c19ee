from __future__ import annotations

import uuid

import httpx
import pytest


@pytest.mark.asyncio
async def test_subscriber_lifecycle(client: httpx.AsyncClient, admin: dict[str, str]) -> None:
    r = await client.post(
        "/v1/admin/subscribers", json={"name": "Grace", "email": "Grace@Example.org "}, headers=admin
    )
    assert r.status_code == 201
    grace = r.json()
    assert grace["email"] == "grace@example.org"

    await client.post(
        "/v1/admin/subscribers", json={"name": "Paul", "email": "paul@example.org"}, headers=admin
    )
    listed = (await client.get("/v1/admin/subscribers", headers=admin)).json()
    assert [s["name"] for s in listed] == ["Paul", "Grace"]

    r = await client.delete(f"/v1/admin/subscribers/{grace['id']}", headers=admin)
    assert r.status_code == 204
    listed = (await client.get("/v1/admin/subscribers", headers=admin)).json()
    assert [s["name"] for s in listed] == ["Paul"]

    r = await client.delete(f"/v1/admin/subscribers/{uuid.uuid4()}", headers=admin)
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_duplicate_and_invalid_emails(
    client: httpx.AsyncClient, admin: dict[str, str]
) -> None:
    body = {"name": "Grace", "email": "grace@example.org"}
    assert (await client.post("/v1/admin/subscribers", json=body, headers=admin)).status_code == 201

    r = await client.post(
        "/v1/admin/subscribers", json={**body, "email": "GRACE@example.org"}, headers=admin
    )
    assert r.status_code == 409

    r = await client.post(
        "/v1/admin/subscribers", json={"name": "Nope", "email": "not-an-email"}, headers=admin
    )
    assert r.status_code == 400


@pytest.mark.asyncio
async def test_subscribers_are_admin_only(client: httpx.AsyncClient) -> None:
    assert (await client.get("/v1/admin/subscribers")).status_code == 401

"""
tests.test_smoke

Smoke tests: the app boots, probes answer and the release label is served.
"""

from __future__ import annotations

import httpx
import pytest


@pytest.mark.asyncio
async def test_health_endpoints(client: httpx.AsyncClient) -> None:
    r = await client.get("/healthz")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"

    r = await client.get("/readyz")
    assert r.status_code == 200
    assert r.json()["status"] == "ready"


@pytest.mark.asyncio
async def test_meta_reports_version(client: httpx.AsyncClient) -> None:
    r = await client.get("/v1/meta")
    assert r.status_code == 200
    assert r.json() == {"service": "ptf-publisher", "version": "v1.0.002"}


@pytest.mark.asyncio
async def test_request_id_is_echoed(client: httpx.AsyncClient) -> None:
    r = await client.get("/healthz", headers={"x-request-id": "abc-123"})
    assert r.headers["x-request-id"] == "abc-123"

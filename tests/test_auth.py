from __future__ import annotations

from datetime import timedelta

import httpx
import pytest

from ptf_publisher.auth.jwt import JwtConfig, JwtValidationError, decode_and_validate, issue_token
from ptf_publisher.auth.passwords import hash_password, verify_password
from ptf_publisher.settings import Settings
from tests.conftest import ADMIN_EMAIL, ADMIN_PASSWORD


def test_password_hash_round_trip() -> None:
    hashed = hash_password("s3cret")
    assert hashed != "s3cret"
    assert verify_password("s3cret", hashed)
    assert not verify_password("guess", hashed)


def test_expired_token_is_rejected() -> None:
    cfg = JwtConfig.from_settings(Settings(env="test"))
    token = issue_token(cfg=cfg, subject="a@b.c", roles=["admin"], ttl=timedelta(seconds=-5))
    with pytest.raises(JwtValidationError):
        decode_and_validate(cfg=cfg, token=token)


@pytest.mark.asyncio
async def test_login_and_me(client: httpx.AsyncClient) -> None:
    r = await client.post(
        "/v1/auth/login", json={"email": ADMIN_EMAIL.upper(), "password": ADMIN_PASSWORD}
    )
    assert r.status_code == 200
    body = r.json()
    assert body["redirect"] == "admin/posts"

    me = await client.get(
        "/v1/auth/me", headers={"Authorization": f"Bearer {body['access_token']}"}
    )
    assert me.json() == {"email": ADMIN_EMAIL, "roles": ["admin"]}


@pytest.mark.asyncio
async def test_bad_password(client: httpx.AsyncClient) -> None:
    r = await client.post("/v1/auth/login", json={"email": ADMIN_EMAIL, "password": "nope"})
    assert r.status_code == 401
    assert r.json()["detail"].startswith("Login failed:")


@pytest.mark.asyncio
async def test_non_admin_token_is_forbidden(
    client: httpx.AsyncClient, settings: Settings
) -> None:
    token = issue_token(cfg=JwtConfig.from_settings(settings), subject="reader", roles=[])
    r = await client.get("/v1/admin/posts", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 403


@pytest.mark.asyncio
async def test_logout_points_home(client: httpx.AsyncClient, admin: dict[str, str]) -> None:
    r = await client.post("/v1/auth/logout", params={"fragment": "admin/posts"}, headers=admin)
    assert r.json()["redirect"] == "home"

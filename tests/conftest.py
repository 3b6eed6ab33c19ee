"""
tests.conftest

Shared fixtures: an app wired to a throwaway SQLite file, an in-memory object
store and a mail sender that records batches instead of talking SMTP.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from dataclasses import dataclass, field

import httpx
import pytest
import pytest_asyncio

from ptf_publisher.api.app import create_app
from ptf_publisher.errors import StorageError
from ptf_publisher.settings import Settings

ADMIN_EMAIL = "admin@timothyfund.org"
ADMIN_PASSWORD = "correct horse battery staple"


class InMemoryObjectStore:
    def __init__(self) -> None:
        self.objects: dict[str, tuple[bytes, str]] = {}
        self.fail_on_upload: int | None = None
        self._uploads = 0

    async def upload(self, key: str, data: bytes, *, content_type: str) -> None:
        self._uploads += 1
        if self.fail_on_upload is not None and self._uploads == self.fail_on_upload:
            raise StorageError(f"Upload failed for {key}: simulated outage")
        self.objects[key] = (data, content_type)

    def public_url(self, key: str) -> str:
        return f"https://cdn.test/post-assets/{key}"

    async def remove(self, keys: list[str]) -> None:
        for key in keys:
            self.objects.pop(key, None)

    async def remove_prefix(self, prefix: str) -> int:
        doomed = [k for k in self.objects if k.startswith(prefix)]
        await self.remove(doomed)
        return len(doomed)


@dataclass
class RecordingSender:
    batches: list[dict[str, object]] = field(default_factory=list)

    async def send_batch(self, *, subject: str, html: str, bcc: list[str]) -> None:
        self.batches.append({"subject": subject, "html": html, "bcc": list(bcc)})


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        env="test",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'ptf-test.db'}",
        admin_email=ADMIN_EMAIL,
        admin_password=ADMIN_PASSWORD,
        broadcast_batch_pause_seconds=0,
        log_level="WARNING",
    )


@pytest.fixture
def store() -> InMemoryObjectStore:
    return InMemoryObjectStore()


@pytest.fixture
def sender() -> RecordingSender:
    return RecordingSender()


@pytest_asyncio.fixture
async def client(
    settings: Settings, store: InMemoryObjectStore, sender: RecordingSender
) -> AsyncIterator[httpx.AsyncClient]:
    app = create_app(settings=settings, object_store=store, mail_sender=sender)
    # httpx's ASGITransport does not run lifespan events; drive them explicitly.
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
            yield c


@pytest_asyncio.fixture
async def admin(client: httpx.AsyncClient) -> dict[str, str]:
    r = await client.post(
        "/v1/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}
    )
    assert r.status_code == 200, r.text
    return {"Authorization": f"Bearer {r.json()['access_token']}"}


def png(name: str, payload: bytes | None = None) -> tuple[str, tuple[str, bytes, str]]:
    return ("files", (name, payload or name.encode(), "image/png"))


async def create_post(
    client: httpx.AsyncClient,
    headers: dict[str, str],
    title: str,
    names: list[str],
    description: str | None = None,
) -> dict:
    data = {"title": title}
    if description is not None:
        data["description"] = description
    r = await client.post(
        "/v1/admin/posts", data=data, files=[png(n) for n in names], headers=headers
    )
    assert r.status_code == 201, r.text
    return r.json()

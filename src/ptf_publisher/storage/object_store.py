"""
ptf_publisher.storage.object_store

S3-compatible object store client (boto3).

Responsibilities:
- Upload bytes under a key and resolve the key's public URL.
- Remove single objects or everything under a prefix.
- Translate SDK failures into `StorageError`.

boto3 is synchronous, so each SDK call runs in a worker thread to keep the
event loop free.
"""

from __future__ import annotations

import asyncio
from typing import Protocol

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ptf_publisher.errors import StorageError
from ptf_publisher.observability.logging import get_logger
from ptf_publisher.settings import Settings

log = get_logger(__name__)


class ObjectStore(Protocol):
    async def upload(self, key: str, data: bytes, *, content_type: str) -> None: ...

    def public_url(self, key: str) -> str: ...

    async def remove(self, keys: list[str]) -> None: ...

    async def remove_prefix(self, prefix: str) -> int: ...


def public_url_for(settings: Settings, key: str) -> str:
    key = key.lstrip("/")
    if settings.storage_public_base_url:
        return f"{settings.storage_public_base_url.rstrip('/')}/{key}"
    if settings.storage_endpoint_url:
        # Path-style URL; works for MinIO, R2 and other S3 look-alikes.
        return f"{settings.storage_endpoint_url.rstrip('/')}/{settings.storage_bucket}/{key}"
    return f"https://{settings.storage_bucket}.s3.{settings.storage_region}.amazonaws.com/{key}"


class S3ObjectStore:
    def __init__(self, *, settings: Settings, client=None) -> None:
        self._settings = settings
        self._bucket = settings.storage_bucket
        self._client = client or boto3.client(
            "s3",
            endpoint_url=settings.storage_endpoint_url,
            region_name=settings.storage_region,
            aws_access_key_id=settings.storage_access_key_id,
            aws_secret_access_key=settings.storage_secret_access_key,
        )

    async def upload(self, key: str, data: bytes, *, content_type: str) -> None:
        try:
            await asyncio.to_thread(
                self._client.put_object,
                Bucket=self._bucket,
                Key=key,
                Body=data,
                ContentType=content_type,
            )
        except (BotoCoreError, ClientError) as e:
            log.exception("storage_upload_failed", key=key)
            raise StorageError(f"Upload failed for {key}: {e}") from e

    def public_url(self, key: str) -> str:
        return public_url_for(self._settings, key)

    async def remove(self, keys: list[str]) -> None:
        if not keys:
            return
        try:
            await asyncio.to_thread(
                self._client.delete_objects,
                Bucket=self._bucket,
                Delete={"Objects": [{"Key": k} for k in keys], "Quiet": True},
            )
        except (BotoCoreError, ClientError) as e:
            log.exception("storage_remove_failed", keys=keys)
            raise StorageError(f"Remove failed: {e}") from e

    async def remove_prefix(self, prefix: str) -> int:
        try:
            keys = await asyncio.to_thread(self._list_keys, prefix)
        except (BotoCoreError, ClientError) as e:
            log.exception("storage_list_failed", prefix=prefix)
            raise StorageError(f"Listing {prefix} failed: {e}") from e
        # delete_objects accepts at most 1000 keys per call.
        for start in range(0, len(keys), 1000):
            await self.remove(keys[start : start + 1000])
        return len(keys)

    def _list_keys(self, prefix: str) -> list[str]:
        paginator = self._client.get_paginator("list_objects_v2")
        keys: list[str] = []
        for page in paginator.paginate(Bucket=self._bucket, Prefix=prefix):
            keys.extend(obj["Key"] for obj in page.get("Contents", []))
        return keys

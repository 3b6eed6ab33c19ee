"""
tests.test_object_store

S3 client wrapper exercised against botocore's Stubber (no network).
"""

from __future__ import annotations

import boto3
import pytest
from botocore.stub import ANY, Stubber

from ptf_publisher.errors import StorageError
from ptf_publisher.settings import Settings
from ptf_publisher.storage.object_store import S3ObjectStore, public_url_for


def _store(settings: Settings) -> tuple[S3ObjectStore, Stubber]:
    client = boto3.client(
        "s3",
        region_name="us-east-1",
        aws_access_key_id="test",
        aws_secret_access_key="test",
    )
    return S3ObjectStore(settings=settings, client=client), Stubber(client)


def test_public_url_variants() -> None:
    assert (
        public_url_for(Settings(storage_public_base_url="https://cdn.example/"), "/a/b.png")
        == "https://cdn.example/a/b.png"
    )
    assert (
        public_url_for(Settings(storage_endpoint_url="http://minio:9000"), "a/b.png")
        == "http://minio:9000/post-assets/a/b.png"
    )
    assert (
        public_url_for(Settings(storage_region="eu-west-1"), "a/b.png")
        == "https://post-assets.s3.eu-west-1.amazonaws.com/a/b.png"
    )


@pytest.mark.asyncio
async def test_upload_puts_object_with_content_type() -> None:
    store, stubber = _store(Settings())
    stubber.add_response(
        "put_object",
        {},
        {"Bucket": "post-assets", "Key": "p/slide_0_1.png", "Body": ANY, "ContentType": "image/png"},
    )
    with stubber:
        await store.upload("p/slide_0_1.png", b"png", content_type="image/png")
    stubber.assert_no_pending_responses()


@pytest.mark.asyncio
async def test_upload_failure_becomes_storage_error() -> None:
    store, stubber = _store(Settings())
    stubber.add_client_error("put_object", service_error_code="AccessDenied", http_status_code=403)
    with stubber, pytest.raises(StorageError):
        await store.upload("k", b"x", content_type="image/png")


@pytest.mark.asyncio
async def test_remove_prefix_lists_then_deletes() -> None:
    store, stubber = _store(Settings())
    stubber.add_response(
        "list_objects_v2",
        {"Contents": [{"Key": "p/slide_0.png"}, {"Key": "p/slide_1.png"}], "IsTruncated": False},
        {"Bucket": "post-assets", "Prefix": "p/"},
    )
    stubber.add_response(
        "delete_objects",
        {},
        {
            "Bucket": "post-assets",
            "Delete": {"Objects": [{"Key": "p/slide_0.png"}, {"Key": "p/slide_1.png"}], "Quiet": True},
        },
    )
    with stubber:
        assert await store.remove_prefix("p/") == 2
    stubber.assert_no_pending_responses()


@pytest.mark.asyncio
async def test_remove_nothing_skips_the_call() -> None:
    store, stubber = _store(Settings())
    with stubber:
        await store.remove([])

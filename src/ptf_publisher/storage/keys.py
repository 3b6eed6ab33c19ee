"""
ptf_publisher.storage.keys

Object key layout inside the assets bucket.

    <post_id>/slide_<index>_<epoch_ms>.png   slide images, grouped per post
    audio/<slide_id>_<epoch_ms>.mp3          slide audio recordings
"""

from __future__ import annotations

import time
import uuid

AUDIO_PREFIX = "audio/"


def epoch_ms() -> int:
    return time.time_ns() // 1_000_000


def post_prefix(post_id: uuid.UUID) -> str:
    return f"{post_id}/"


def slide_image_key(post_id: uuid.UUID, index: int, *, now_ms: int | None = None) -> str:
    return f"{post_prefix(post_id)}slide_{index}_{now_ms if now_ms is not None else epoch_ms()}.png"


def slide_audio_key(slide_id: uuid.UUID, *, now_ms: int | None = None) -> str:
    return f"{AUDIO_PREFIX}{slide_id}_{now_ms if now_ms is not None else epoch_ms()}.mp3"


def audio_key_from_url(audio_url: str) -> str:
    # Older rows only carry the URL; the object name is its last path segment.
    name = audio_url.split("?", 1)[0].rstrip("/").rsplit("/", 1)[-1]
    return f"{AUDIO_PREFIX}{name}"

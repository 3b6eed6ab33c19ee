"""
ptf_publisher.api.schemas

Request/response models shared by the routers.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class _ORM(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class PostSummary(_ORM):
    id: uuid.UUID
    title: str
    slug: str
    description: str | None = None
    created_at: datetime


class SlideOut(_ORM):
    id: uuid.UUID
    post_id: uuid.UUID
    image_url: str
    audio_url: str | None = None
    order_index: int


class CommentOut(_ORM):
    id: uuid.UUID
    post_id: uuid.UUID
    author_name: str
    comment_text: str
    status: str
    created_at: datetime


class PendingCommentOut(CommentOut):
    post_title: str


class PostPageOut(BaseModel):
    post: PostSummary
    slides: list[SlideOut]
    comments: list[CommentOut]


class GalleryOut(BaseModel):
    post: PostSummary
    slides: list[SlideOut]


class CommentIn(BaseModel):
    author_name: str = Field(min_length=1, max_length=256)
    comment_text: str = Field(min_length=1, max_length=10_000)


class MessageOut(BaseModel):
    message: str


class SubscriberIn(BaseModel):
    name: str = Field(min_length=1, max_length=256)
    email: str = Field(min_length=3, max_length=320)


class SubscriberOut(_ORM):
    id: uuid.UUID
    name: str
    email: str
    created_at: datetime


class ModerationIn(BaseModel):
    status: Literal["approved", "deleted"]


class ReorderIn(BaseModel):
    slide_ids: list[uuid.UUID]


class AudioOut(BaseModel):
    slide: SlideOut
    duration: str | None = None


class LoginIn(BaseModel):
    email: str = Field(min_length=3, max_length=320)
    password: str = Field(min_length=1)


class TokenOut(BaseModel):
    access_token: str
    token_type: str = "bearer"
    redirect: str | None = None


class BroadcastIn(BaseModel):
    # Field names follow the JSON body the front end already sends.
    postId: str = Field(min_length=1)
    title: str = Field(min_length=1)
    content: str | None = None


class NavigationOut(BaseModel):
    fragment: str
    view: str | None = None
    params: dict[str, str] = Field(default_factory=dict)
    redirect: str | None = None

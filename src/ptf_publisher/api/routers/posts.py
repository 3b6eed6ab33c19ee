"""
ptf_publisher.api.routers.posts

Public reader endpoints.

Responsibilities:
- Latest update (home), archive listing and individual post pages.
- Comment submission (queued for moderation).
"""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_201_CREATED

from ptf_publisher.api.deps import db_session
from ptf_publisher.api.routers._views import page_out
from ptf_publisher.api.schemas import CommentIn, MessageOut, PostPageOut, PostSummary
from ptf_publisher.services.content import COMMENT_RECEIVED, ContentService

router = APIRouter(prefix="/v1/posts", tags=["posts"])


@router.get("/latest", response_model=PostPageOut)
async def latest_post(session: AsyncSession = Depends(db_session)) -> PostPageOut:
    return page_out(await ContentService(session=session).latest())


@router.get("", response_model=list[PostSummary])
async def archive(session: AsyncSession = Depends(db_session)) -> list[PostSummary]:
    posts = await ContentService(session=session).archive()
    return [PostSummary.model_validate(p) for p in posts]


@router.get("/{post_id}", response_model=PostPageOut)
async def post_page(
    post_id: uuid.UUID,
    session: AsyncSession = Depends(db_session),
) -> PostPageOut:
    return page_out(await ContentService(session=session).post_page(post_id))


@router.post("/{post_id}/comments", response_model=MessageOut, status_code=HTTP_201_CREATED)
async def submit_comment(
    post_id: uuid.UUID,
    body: CommentIn,
    session: AsyncSession = Depends(db_session),
) -> MessageOut:
    await ContentService(session=session).submit_comment(
        post_id, author_name=body.author_name, comment_text=body.comment_text
    )
    return MessageOut(message=COMMENT_RECEIVED)

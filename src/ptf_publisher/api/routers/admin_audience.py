"""
ptf_publisher.api.routers.admin_audience

Dashboard endpoints for the audience: subscribers and the comment queue.
"""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from ptf_publisher.api.deps import db_session
from ptf_publisher.api.routers._views import pending_out
from ptf_publisher.api.schemas import (
    CommentOut,
    ModerationIn,
    PendingCommentOut,
    SubscriberIn,
    SubscriberOut,
)
from ptf_publisher.auth.deps import require_admin
from ptf_publisher.services.content import ModerationService
from ptf_publisher.services.subscribers import SubscriberService

router = APIRouter(prefix="/v1/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@router.get("/subscribers", response_model=list[SubscriberOut])
async def list_subscribers(session: AsyncSession = Depends(db_session)) -> list[SubscriberOut]:
    subs = await SubscriberService(session=session).list()
    return [SubscriberOut.model_validate(s) for s in subs]


@router.post("/subscribers", response_model=SubscriberOut, status_code=HTTP_201_CREATED)
async def add_subscriber(
    body: SubscriberIn,
    session: AsyncSession = Depends(db_session),
) -> SubscriberOut:
    sub = await SubscriberService(session=session).add(name=body.name, email=body.email)
    return SubscriberOut.model_validate(sub)


@router.delete("/subscribers/{subscriber_id}", status_code=HTTP_204_NO_CONTENT)
async def delete_subscriber(
    subscriber_id: uuid.UUID,
    session: AsyncSession = Depends(db_session),
) -> None:
    await SubscriberService(session=session).delete(subscriber_id)


@router.get("/comments/pending", response_model=list[PendingCommentOut])
async def pending_comments(session: AsyncSession = Depends(db_session)) -> list[PendingCommentOut]:
    rows = await ModerationService(session=session).pending()
    return [pending_out(comment, title) for comment, title in rows]


@router.put("/comments/{comment_id}/status", response_model=CommentOut)
async def moderate_comment(
    comment_id: uuid.UUID,
    body: ModerationIn,
    session: AsyncSession = Depends(db_session),
) -> CommentOut:
    comment = await ModerationService(session=session).moderate(comment_id, body.status)
    return CommentOut.model_validate(comment)

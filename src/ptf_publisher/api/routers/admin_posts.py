"""
ptf_publisher.api.routers.admin_posts

Dashboard endpoints for posts and their galleries.

Responsibilities:
- Create a post from a folder of PNG slides (multipart upload).
- List/delete posts and trigger email broadcasts.
- Edit galleries: reorder slides, delete slides, attach or remove audio.
"""

from __future__ import annotations

import uuid
from typing import Any

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT, HTTP_400_BAD_REQUEST

from ptf_publisher.api.deps import (
    db_session,
    mail_sender_dep,
    object_store_dep,
    request_origin,
    settings_dep,
)
from ptf_publisher.api.routers._views import gallery_out
from ptf_publisher.api.schemas import AudioOut, GalleryOut, PostSummary, ReorderIn, SlideOut
from ptf_publisher.auth.deps import require_admin
from ptf_publisher.errors import NotFoundError, PublisherError
from ptf_publisher.mail.sender import MailSender
from ptf_publisher.observability.logging import get_logger
from ptf_publisher.services.broadcast import BroadcastService
from ptf_publisher.services.gallery import GalleryService, format_elapsed
from ptf_publisher.services.publishing import ImageFile, PublishingService
from ptf_publisher.settings import Settings
from ptf_publisher.storage.object_store import ObjectStore

log = get_logger(__name__)

router = APIRouter(prefix="/v1/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@router.get("/posts", response_model=list[PostSummary])
async def list_posts(
    session: AsyncSession = Depends(db_session),
    store: ObjectStore = Depends(object_store_dep),
) -> list[PostSummary]:
    posts = await PublishingService(session=session, store=store).list_posts()
    return [PostSummary.model_validate(p) for p in posts]


@router.post("/posts", response_model=GalleryOut, status_code=HTTP_201_CREATED)
async def create_post(
    title: str = Form(default=""),
    description: str | None = Form(default=None),
    files: list[UploadFile] | None = File(default=None),
    session: AsyncSession = Depends(db_session),
    store: ObjectStore = Depends(object_store_dep),
) -> GalleryOut:
    images = [
        ImageFile(
            # Folder uploads may carry a relative path; ordering uses the base name.
            name=(f.filename or "").rsplit("/", 1)[-1],
            content_type=f.content_type or "",
            data=await f.read(),
        )
        for f in files or []
    ]
    post, slides = await PublishingService(session=session, store=store).create_post_with_slides(
        title=title, files=images, description=description
    )
    return gallery_out(post, slides)


@router.delete("/posts/{post_id}", status_code=HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: uuid.UUID,
    session: AsyncSession = Depends(db_session),
    store: ObjectStore = Depends(object_store_dep),
) -> None:
    await PublishingService(session=session, store=store).delete_post(post_id)


@router.post("/posts/{post_id}/broadcast", response_model=None)
async def broadcast_post(
    post_id: uuid.UUID,
    origin: str = Depends(request_origin),
    session: AsyncSession = Depends(db_session),
    settings: Settings = Depends(settings_dep),
    sender: MailSender = Depends(mail_sender_dep),
) -> dict[str, Any] | JSONResponse:
    svc = BroadcastService(session=session, settings=settings, sender=sender)
    try:
        return await svc.broadcast_post(post_id, origin=origin)
    except NotFoundError:
        raise
    except PublisherError as e:
        # Same error body as send-batch-emails.
        log.warning("broadcast_failed", post_id=str(post_id), error=str(e))
        return JSONResponse(status_code=HTTP_400_BAD_REQUEST, content={"error": str(e)})


@router.get("/posts/{post_id}/gallery", response_model=GalleryOut)
async def edit_gallery(
    post_id: uuid.UUID,
    session: AsyncSession = Depends(db_session),
    store: ObjectStore = Depends(object_store_dep),
) -> GalleryOut:
    post, slides = await GalleryService(session=session, store=store).gallery(post_id)
    return gallery_out(post, slides)


@router.put("/posts/{post_id}/gallery/order", response_model=GalleryOut)
async def reorder_gallery(
    post_id: uuid.UUID,
    body: ReorderIn,
    session: AsyncSession = Depends(db_session),
    store: ObjectStore = Depends(object_store_dep),
) -> GalleryOut:
    post, slides = await GalleryService(session=session, store=store).reorder(
        post_id, body.slide_ids
    )
    return gallery_out(post, slides)


@router.delete("/slides/{slide_id}", status_code=HTTP_204_NO_CONTENT)
async def delete_slide(
    slide_id: uuid.UUID,
    session: AsyncSession = Depends(db_session),
    store: ObjectStore = Depends(object_store_dep),
) -> None:
    await GalleryService(session=session, store=store).delete_slide(slide_id)


@router.put("/slides/{slide_id}/audio", response_model=AudioOut)
async def upload_audio(
    slide_id: uuid.UUID,
    audio: UploadFile = File(...),
    duration_seconds: float | None = Form(default=None, ge=0),
    session: AsyncSession = Depends(db_session),
    store: ObjectStore = Depends(object_store_dep),
) -> AudioOut:
    slide = await GalleryService(session=session, store=store).upload_audio(
        slide_id, await audio.read(), duration_seconds=duration_seconds
    )
    return AudioOut(
        slide=SlideOut.model_validate(slide),
        duration=format_elapsed(duration_seconds) if duration_seconds is not None else None,
    )


@router.delete("/slides/{slide_id}/audio", response_model=SlideOut)
async def delete_audio(
    slide_id: uuid.UUID,
    session: AsyncSession = Depends(db_session),
    store: ObjectStore = Depends(object_store_dep),
) -> SlideOut:
    slide = await GalleryService(session=session, store=store).delete_audio(slide_id)
    return SlideOut.model_validate(slide)

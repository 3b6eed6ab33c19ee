"""
ptf_publisher.api.routers.functions

`send-batch-emails`: broadcast endpoint with the same request/response contract
the front end used against the hosted mail function.

Request:  {"postId": ..., "title": ..., "content": ...}
Response: {"success": true, "count": n} | {"message": "No subscribers found"}
Errors:   400 {"error": "..."}
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_400_BAD_REQUEST

from ptf_publisher.api.deps import db_session, mail_sender_dep, request_origin, settings_dep
from ptf_publisher.api.schemas import BroadcastIn
from ptf_publisher.auth.deps import require_admin
from ptf_publisher.errors import PublisherError
from ptf_publisher.mail.sender import MailSender
from ptf_publisher.observability.logging import get_logger
from ptf_publisher.services.broadcast import BroadcastService
from ptf_publisher.settings import Settings

log = get_logger(__name__)

router = APIRouter(prefix="/v1/functions", tags=["functions"], dependencies=[Depends(require_admin)])


@router.post("/send-batch-emails", response_model=None)
async def send_batch_emails(
    body: BroadcastIn,
    origin: str = Depends(request_origin),
    session: AsyncSession = Depends(db_session),
    settings: Settings = Depends(settings_dep),
    sender: MailSender = Depends(mail_sender_dep),
) -> dict[str, Any] | JSONResponse:
    svc = BroadcastService(session=session, settings=settings, sender=sender)
    try:
        return await svc.broadcast(
            post_id=body.postId, title=body.title, content=body.content, origin=origin
        )
    except PublisherError as e:
        log.warning("broadcast_failed", error=str(e))
        return JSONResponse(status_code=HTTP_400_BAD_REQUEST, content={"error": str(e)})

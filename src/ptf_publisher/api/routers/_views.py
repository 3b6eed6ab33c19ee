"""
ptf_publisher.api.routers._views

Mapping from service results to response models, shared across routers.
"""

from __future__ import annotations

from ptf_publisher.api.schemas import (
    CommentOut,
    GalleryOut,
    PendingCommentOut,
    PostPageOut,
    PostSummary,
    SlideOut,
)
from ptf_publisher.db.models import Comment, Post, Slide
from ptf_publisher.services.content import PostPage


def page_out(page: PostPage) -> PostPageOut:
    return PostPageOut(
        post=PostSummary.model_validate(page.post),
        slides=[SlideOut.model_validate(s) for s in page.slides],
        comments=[CommentOut.model_validate(c) for c in page.comments],
    )


def gallery_out(post: Post, slides: list[Slide]) -> GalleryOut:
    return GalleryOut(
        post=PostSummary.model_validate(post),
        slides=[SlideOut.model_validate(s) for s in slides],
    )


def pending_out(comment: Comment, post_title: str) -> PendingCommentOut:
    return PendingCommentOut(
        **CommentOut.model_validate(comment).model_dump(),
        post_title=post_title,
    )

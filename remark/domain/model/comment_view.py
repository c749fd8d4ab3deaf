"""Read-side projections of comments.

Derived fields (counts and the viewer's vote flags) live only here and are
computed from the stored vote sets every time a view is built.
"""

import math
from datetime import datetime
from typing import Optional

from remark.domain.model.comment import Comment
from remark.domain.model.common import DomainModel
from remark.domain.value import CommentId, UserId


class CommentView(DomainModel):
    """A comment augmented with derived vote fields.

    has_liked/has_disliked are None when the view was built without a viewer.
    """

    id: CommentId
    author_id: UserId
    content: str
    parent_id: Optional[CommentId]
    liked_by: frozenset[UserId]
    disliked_by: frozenset[UserId]
    is_deleted: bool
    created_at: datetime
    updated_at: datetime
    like_count: int
    dislike_count: int
    has_liked: Optional[bool] = None
    has_disliked: Optional[bool] = None

    @classmethod
    def from_comment(
        cls, comment: Comment, viewer_id: Optional[UserId] = None
    ) -> "CommentView":
        """Project a comment for an (optional) viewer."""
        return cls(
            id=comment.id,
            author_id=comment.author_id,
            content=comment.content,
            parent_id=comment.parent_id,
            liked_by=comment.liked_by,
            disliked_by=comment.disliked_by,
            is_deleted=comment.is_deleted,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            like_count=len(comment.liked_by),
            dislike_count=len(comment.disliked_by),
            has_liked=viewer_id in comment.liked_by if viewer_id else None,
            has_disliked=viewer_id in comment.disliked_by if viewer_id else None,
        )


class PageMeta(DomainModel):
    """Offset pagination metadata."""

    page: int
    page_size: int
    total: int
    total_pages: int

    @classmethod
    def build(cls, page: int, page_size: int, total: int) -> "PageMeta":
        return cls(
            page=page,
            page_size=page_size,
            total=total,
            total_pages=math.ceil(total / page_size),
        )


class CommentPage(DomainModel):
    """One page of comment views plus its metadata."""

    items: list[CommentView]
    meta: PageMeta


class CommentStatistics(DomainModel):
    """Aggregate counters over all stored comments."""

    total: int
    top_level: int
    replies: int
    deleted: int
    total_likes: int
    total_dislikes: int

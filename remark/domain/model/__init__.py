"""Domain model entities for Remark."""

from remark.domain.model.comment import Comment
from remark.domain.model.comment_view import (
    CommentPage,
    CommentStatistics,
    CommentView,
    PageMeta,
)

__all__ = [
    "Comment",
    "CommentPage",
    "CommentStatistics",
    "CommentView",
    "PageMeta",
]

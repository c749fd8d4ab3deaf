"""Comment use cases."""

from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_comment import GetCommentRequest, GetCommentUseCase
from .get_replies import GetRepliesRequest, GetRepliesUseCase
from .get_statistics import CommentStatisticsResponse, GetCommentStatisticsUseCase
from .item import CommentItem, CommentListResponse, PageMetaItem
from .list_comments import ListCommentsRequest, ListCommentsUseCase
from .update_comment import UpdateCommentRequest, UpdateCommentUseCase

__all__ = [
    "CommentItem",
    "CommentListResponse",
    "CommentStatisticsResponse",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetCommentRequest",
    "GetCommentStatisticsUseCase",
    "GetCommentUseCase",
    "GetRepliesRequest",
    "GetRepliesUseCase",
    "ListCommentsRequest",
    "ListCommentsUseCase",
    "PageMetaItem",
    "UpdateCommentRequest",
    "UpdateCommentUseCase",
]

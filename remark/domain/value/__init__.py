"""Domain value objects for Remark."""

from remark.domain.value.identifiers import CommentId, UserId
from remark.domain.value.types import (
    CONTENT_MAX_LENGTH,
    CONTENT_MIN_LENGTH,
    CommentSortOrder,
    VoteAction,
    VoteState,
)

__all__ = [
    # Identifiers
    "CommentId",
    "UserId",
    # Types
    "CommentSortOrder",
    "VoteAction",
    "VoteState",
    # Constants
    "CONTENT_MAX_LENGTH",
    "CONTENT_MIN_LENGTH",
]

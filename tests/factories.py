"""Builders for test data."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

from remark.domain.model import Comment
from remark.domain.value import CommentId, UserId

BASE_TIME = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)


def make_comment(
    content: str = "Test comment",
    author_id: UserId | None = None,
    parent_id: CommentId | None = None,
    liked_by: set[UserId] | None = None,
    disliked_by: set[UserId] | None = None,
    is_deleted: bool = False,
    minutes: int = 0,
) -> Comment:
    """Build a comment with a predictable timestamp.

    Args:
        content: Comment text
        author_id: Author (random when omitted)
        parent_id: Parent comment for replies
        liked_by: Users who like the comment
        disliked_by: Users who dislike the comment
        is_deleted: Soft delete flag
        minutes: Offset from BASE_TIME, so larger means newer

    Returns:
        Comment entity (not saved)
    """
    created_at = BASE_TIME + timedelta(minutes=minutes)
    return Comment(
        id=CommentId(uuid4()),
        author_id=author_id or UserId(uuid4()),
        content=content,
        parent_id=parent_id,
        liked_by=frozenset(liked_by or ()),
        disliked_by=frozenset(disliked_by or ()),
        is_deleted=is_deleted,
        created_at=created_at,
        updated_at=created_at,
    )


def new_user() -> UserId:
    return UserId(uuid4())

"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Iterable, Optional
from uuid import UUID

from remark.domain.model import Comment
from remark.domain.value import CommentId, UserId


def _as_uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _user_set(values: Optional[Iterable[Any]]) -> frozenset[UserId]:
    return frozenset(UserId(_as_uuid(v)) for v in values or ())


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_as_uuid(row["id"])),
        author_id=UserId(_as_uuid(row["author_id"])),
        content=row["content"],
        parent_id=CommentId(_as_uuid(row["parent_id"]))
        if row.get("parent_id")
        else None,
        liked_by=_user_set(row.get("liked_by")),
        disliked_by=_user_set(row.get("disliked_by")),
        is_deleted=row["is_deleted"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Vote sets become lists for the PostgreSQL array columns.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = comment.model_dump()
    data["liked_by"] = list(comment.liked_by)
    data["disliked_by"] = list(comment.disliked_by)
    return data

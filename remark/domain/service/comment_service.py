"""Comment domain service."""

from uuid import uuid4

import logfire

from remark.domain.error import NotFoundError, ValidationError
from remark.domain.model import Comment
from remark.domain.model.common import utcnow
from remark.domain.repository import CommentRepository
from remark.domain.value import (
    CONTENT_MAX_LENGTH,
    CONTENT_MIN_LENGTH,
    CommentId,
    CommentSortOrder,
    UserId,
)

from .base import Service


def validate_content(content: str) -> str:
    """Trim and bounds-check comment content.

    Args:
        content: Raw content

    Returns:
        Trimmed content

    Raises:
        ValidationError: If the trimmed content is empty or too long
    """
    trimmed = content.strip()
    if not CONTENT_MIN_LENGTH <= len(trimmed) <= CONTENT_MAX_LENGTH:
        raise ValidationError(
            f"Content must be {CONTENT_MIN_LENGTH}-{CONTENT_MAX_LENGTH} characters"
        )
    return trimmed


class CommentService(Service):
    """Domain service for comment storage operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self,
        content: str,
        author_id: UserId,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a top-level comment or a reply to another comment.

        The parent only has to exist; a soft-deleted parent still accepts
        replies.

        Args:
            content: Comment text
            author_id: Author user ID
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ValidationError: If content is out of bounds
            NotFoundError: If parent comment doesn't exist
        """
        with logfire.span(
            "comment_service.create_comment",
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            content = validate_content(content)

            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.warn("Parent comment not found", parent_id=str(parent_id))
                    raise NotFoundError("Parent comment", str(parent_id))

            now = utcnow()
            comment = Comment(
                id=CommentId(uuid4()),
                author_id=author_id,
                content=content,
                parent_id=parent_id,
                liked_by=frozenset(),
                disliked_by=frozenset(),
                is_deleted=False,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                author_id=str(author_id),
                is_reply=saved.is_reply,
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def require_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID or raise NotFoundError."""
        comment = await self.get_comment_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def find_children(
        self, parent_id: CommentId, page: int, page_size: int
    ) -> tuple[list[Comment], int]:
        """Get one page of a comment's direct replies, newest first.

        Args:
            parent_id: Parent comment ID
            page: 1-based page number
            page_size: Replies per page

        Returns:
            Tuple of (replies on the page, total replies)
        """
        with logfire.span(
            "comment_service.find_children",
            parent_id=str(parent_id),
            page=page,
            page_size=page_size,
        ):
            total = await self.comment_repository.count(parent_id=parent_id)
            children = await self.comment_repository.find_all(
                parent_id=parent_id,
                sort=CommentSortOrder.NEWEST,
                limit=page_size,
                offset=(page - 1) * page_size,
            )
            logfire.info(
                "Replies retrieved",
                parent_id=str(parent_id),
                count=len(children),
                total=total,
            )
            return children, total

    async def update_content(self, comment_id: CommentId, content: str) -> Comment:
        """Replace the content of a comment.

        Args:
            comment_id: Comment ID
            content: New content

        Returns:
            Updated comment

        Raises:
            ValidationError: If content is out of bounds
            NotFoundError: If comment doesn't exist
        """
        with logfire.span(
            "comment_service.update_content",
            comment_id=str(comment_id),
            content_length=len(content),
        ):
            content = validate_content(content)
            updated = await self.comment_repository.update_content(comment_id, content)
            if updated is None:
                logfire.warn(
                    "Comment not found for content update", comment_id=str(comment_id)
                )
                raise NotFoundError("Comment", str(comment_id))

            logfire.info("Comment content updated", comment_id=str(comment_id))
            return updated

    async def set_vote_sets(
        self,
        comment_id: CommentId,
        liked_by: frozenset[UserId],
        disliked_by: frozenset[UserId],
    ) -> Comment:
        """Replace both vote sets at once.

        Args:
            comment_id: Comment ID
            liked_by: Users who like the comment
            disliked_by: Users who dislike the comment

        Returns:
            Updated comment

        Raises:
            ValidationError: If a user appears in both sets
            NotFoundError: If comment doesn't exist
        """
        overlap = liked_by & disliked_by
        if overlap:
            raise ValidationError(
                f"Users cannot both like and dislike a comment: {sorted(map(str, overlap))}"
            )

        updated = await self.comment_repository.set_vote_sets(
            comment_id, frozenset(liked_by), frozenset(disliked_by)
        )
        if updated is None:
            raise NotFoundError("Comment", str(comment_id))
        return updated

    async def soft_delete(self, comment_id: CommentId) -> Comment:
        """Mark a comment as deleted. Its replies are untouched.

        Raises:
            NotFoundError: If comment doesn't exist
        """
        with logfire.span("comment_service.soft_delete", comment_id=str(comment_id)):
            deleted = await self.comment_repository.soft_delete(comment_id)
            if deleted is None:
                raise NotFoundError("Comment", str(comment_id))
            logfire.info("Comment soft-deleted", comment_id=str(comment_id))
            return deleted

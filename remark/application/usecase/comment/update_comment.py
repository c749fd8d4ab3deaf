"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from remark.domain.model import CommentView
from remark.domain.service import OwnershipService
from remark.domain.value import CommentId, UserId

from .item import CommentItem


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    content: str  # New content (required, cannot be empty)


class UpdateCommentUseCase:
    """Use case for updating a comment's content."""

    def __init__(self, ownership_service: OwnershipService) -> None:
        """Initialize update comment use case.

        Args:
            ownership_service: Ownership domain service
        """
        self.ownership_service = ownership_service

    async def execute(self, request: UpdateCommentRequest) -> CommentItem:
        """Execute update comment flow.

        Args:
            request: Update comment request with comment ID, user ID and new content

        Returns:
            Updated comment details

        Raises:
            NotFoundError: If comment doesn't exist
            NotAuthorizedError: If user doesn't own the comment
            ContentDeletedError: If comment is deleted
            ValidationError: If content is out of bounds
        """
        user_id = UserId(UUID(request.user_id))

        updated = await self.ownership_service.update_comment(
            comment_id=CommentId(UUID(request.comment_id)),
            requester_id=user_id,
            content=request.content,
        )

        return CommentItem.from_view(CommentView.from_comment(updated, user_id))

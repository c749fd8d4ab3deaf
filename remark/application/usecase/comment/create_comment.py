"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from remark.domain.model import CommentView
from remark.domain.service import CommentService
from remark.domain.value import CommentId, UserId

from .item import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    content: str
    author_id: str  # User ID from authenticated user
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentUseCase:
    """Use case for creating a comment or replying to another comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            Created comment, as seen by its author

        Raises:
            NotFoundError: If parent comment doesn't exist
            ValidationError: If content is out of bounds
        """
        author_id = UserId(UUID(request.author_id))
        parent_id = CommentId(UUID(request.parent_id)) if request.parent_id else None

        comment = await self.comment_service.create_comment(
            content=request.content,
            author_id=author_id,
            parent_id=parent_id,
        )

        return CommentItem.from_view(CommentView.from_comment(comment, author_id))

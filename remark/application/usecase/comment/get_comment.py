"""Get single comment use case."""

from uuid import UUID

from pydantic import BaseModel

from remark.domain.service import ThreadService
from remark.domain.value import CommentId, UserId

from .item import CommentItem


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: str  # UUID string
    user_id: str | None = None  # Viewer, for has_liked/has_disliked


class GetCommentUseCase:
    """Use case for retrieving one comment with its vote summary."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize get comment use case.

        Args:
            thread_service: Thread query domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: GetCommentRequest) -> CommentItem:
        """Execute get comment flow.

        Raises:
            NotFoundError: If comment doesn't exist
        """
        view = await self.thread_service.get_one(
            CommentId(UUID(request.comment_id)),
            viewer_id=UserId(UUID(request.user_id)) if request.user_id else None,
        )
        return CommentItem.from_view(view)

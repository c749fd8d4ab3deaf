"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from remark.domain.service import OwnershipService
from remark.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    success: bool
    message: str


class DeleteCommentUseCase:
    """Use case for soft-deleting a comment."""

    def __init__(self, ownership_service: OwnershipService) -> None:
        """Initialize delete comment use case.

        Args:
            ownership_service: Ownership domain service
        """
        self.ownership_service = ownership_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If comment doesn't exist
            NotAuthorizedError: If user doesn't own the comment
        """
        await self.ownership_service.delete_comment(
            comment_id=CommentId(UUID(request.comment_id)),
            requester_id=UserId(UUID(request.user_id)),
        )

        return DeleteCommentResponse(
            success=True,
            message="Comment deleted successfully",
        )

"""Toggle vote use case."""

from uuid import UUID

from pydantic import BaseModel

from remark.application.usecase.comment.item import CommentItem
from remark.domain.model import CommentView
from remark.domain.service import VoteService
from remark.domain.value import CommentId, UserId, VoteAction


class ToggleVoteRequest(BaseModel):
    """Toggle vote request."""

    comment_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    action: VoteAction


class ToggleVoteUseCase:
    """Use case for liking or disliking a comment (each call toggles)."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize toggle vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: ToggleVoteRequest) -> CommentItem:
        """Execute toggle vote flow.

        Args:
            request: Toggle vote request

        Returns:
            Comment with updated counts, as seen by the voter

        Raises:
            NotFoundError: If comment doesn't exist
        """
        comment_id = CommentId(UUID(request.comment_id))
        user_id = UserId(UUID(request.user_id))

        if request.action == VoteAction.LIKE:
            comment = await self.vote_service.like_toggle(comment_id, user_id)
        else:  # VoteAction.DISLIKE
            comment = await self.vote_service.dislike_toggle(comment_id, user_id)

        return CommentItem.from_view(CommentView.from_comment(comment, user_id))

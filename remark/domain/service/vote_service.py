"""Vote domain service.

Likes and dislikes are mutually exclusive per (comment, user). Each action
is a toggle:

    state     like      dislike
    neutral   liked     disliked
    liked     neutral   disliked
    disliked  liked     neutral

Repeating a request flips the state again.
"""

import logfire

from remark.domain.error import NotFoundError
from remark.domain.model import Comment
from remark.domain.repository import CommentRepository
from remark.domain.value import CommentId, UserId, VoteAction, VoteState

from .base import Service


class VoteService(Service):
    """Domain service for like/dislike toggling."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize vote service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def toggle(
        self, comment_id: CommentId, user_id: UserId, action: VoteAction
    ) -> Comment:
        """Toggle a user's like or dislike on a comment.

        Any user may vote, including the author, and deleted comments can
        still be voted on.

        Args:
            comment_id: Comment ID
            user_id: Voting user ID
            action: Like or dislike

        Returns:
            Comment with updated vote sets

        Raises:
            NotFoundError: If comment doesn't exist
        """
        with logfire.span(
            "vote_service.toggle",
            comment_id=str(comment_id),
            user_id=str(user_id),
            action=action.value,
        ):
            updated = await self.comment_repository.toggle_vote(
                comment_id, user_id, action
            )
            if updated is None:
                logfire.warn("Vote on non-existent comment", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Vote toggled",
                comment_id=str(comment_id),
                user_id=str(user_id),
                action=action.value,
                state=updated.vote_state_of(user_id).value,
                like_count=len(updated.liked_by),
                dislike_count=len(updated.disliked_by),
            )
            return updated

    async def like_toggle(self, comment_id: CommentId, user_id: UserId) -> Comment:
        """Like a comment, or remove an existing like."""
        return await self.toggle(comment_id, user_id, VoteAction.LIKE)

    async def dislike_toggle(self, comment_id: CommentId, user_id: UserId) -> Comment:
        """Dislike a comment, or remove an existing dislike."""
        return await self.toggle(comment_id, user_id, VoteAction.DISLIKE)

    @staticmethod
    def vote_state(comment: Comment, user_id: UserId) -> VoteState:
        """Current vote state of a user on a comment."""
        return comment.vote_state_of(user_id)

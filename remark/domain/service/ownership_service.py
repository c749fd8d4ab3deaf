"""Ownership and lifecycle domain service.

Only a comment's author may change its content or delete it. Voting is not
guarded here.
"""

import logfire

from remark.domain.error import ContentDeletedError, NotAuthorizedError
from remark.domain.model import Comment
from remark.domain.value import CommentId, UserId

from .base import Service
from .comment_service import CommentService


class OwnershipService(Service):
    """Domain service gating author-only mutations."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize ownership service.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    @staticmethod
    def authorize_mutation(comment: Comment, requester_id: UserId) -> None:
        """Ensure the requester authored the comment.

        Raises:
            NotAuthorizedError: If requester is not the author
        """
        if comment.author_id != requester_id:
            logfire.warn(
                "Unauthorized comment mutation attempt",
                comment_id=str(comment.id),
                requester_id=str(requester_id),
            )
            raise NotAuthorizedError("comment", str(comment.id), str(requester_id))

    async def update_comment(
        self, comment_id: CommentId, requester_id: UserId, content: str
    ) -> Comment:
        """Update a comment's content on behalf of its author.

        Args:
            comment_id: Comment ID
            requester_id: User requesting the change
            content: New content

        Returns:
            Updated comment

        Raises:
            NotFoundError: If comment doesn't exist
            NotAuthorizedError: If requester is not the author
            ContentDeletedError: If the comment has been soft-deleted
        """
        with logfire.span(
            "ownership_service.update_comment",
            comment_id=str(comment_id),
            requester_id=str(requester_id),
        ):
            comment = await self.comment_service.require_comment(comment_id)
            self.authorize_mutation(comment, requester_id)

            if comment.is_deleted:
                raise ContentDeletedError("comment", str(comment_id))

            return await self.comment_service.update_content(comment_id, content)

    async def delete_comment(
        self, comment_id: CommentId, requester_id: UserId
    ) -> Comment:
        """Soft-delete a comment on behalf of its author.

        Deleting an already deleted comment leaves it deleted. Replies stay
        visible under the deleted parent.

        Raises:
            NotFoundError: If comment doesn't exist
            NotAuthorizedError: If requester is not the author
        """
        with logfire.span(
            "ownership_service.delete_comment",
            comment_id=str(comment_id),
            requester_id=str(requester_id),
        ):
            comment = await self.comment_service.require_comment(comment_id)
            self.authorize_mutation(comment, requester_id)
            return await self.comment_service.soft_delete(comment_id)

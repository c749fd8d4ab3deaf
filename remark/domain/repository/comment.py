"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from remark.domain.model import Comment, CommentStatistics
from remark.domain.value import CommentId, CommentSortOrder, UserId, VoteAction


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.

    Every mutating method is a single atomic unit against the store and
    returns the comment as persisted, or None when no comment matched.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Soft-deleted comments are returned like any other.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        parent_id: Optional[CommentId] = None,
        sort: CommentSortOrder = CommentSortOrder.NEWEST,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments sharing a parent, sorted and paginated.

        Args:
            parent_id: Parent comment ID, or None for top-level comments
            sort: Sort order; popularity orders break ties by newest first
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            List of comments matching the filter
        """
        pass

    @abstractmethod
    async def count(self, parent_id: Optional[CommentId] = None) -> int:
        """Count comments sharing a parent.

        Args:
            parent_id: Parent comment ID, or None for top-level comments

        Returns:
            Number of matching comments (independent of pagination)
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace a comment's content and bump updated_at.

        Args:
            comment_id: Comment ID
            content: New content

        Returns:
            Updated comment, None if it doesn't exist
        """
        pass

    @abstractmethod
    async def set_vote_sets(
        self,
        comment_id: CommentId,
        liked_by: frozenset[UserId],
        disliked_by: frozenset[UserId],
    ) -> Optional[Comment]:
        """Atomically replace both vote sets.

        Args:
            comment_id: Comment ID
            liked_by: New set of liking users
            disliked_by: New set of disliking users (disjoint from liked_by)

        Returns:
            Updated comment, None if it doesn't exist
        """
        pass

    @abstractmethod
    async def toggle_vote(
        self, comment_id: CommentId, user_id: UserId, action: VoteAction
    ) -> Optional[Comment]:
        """Toggle one user's vote as a single conditional membership update.

        Must not read the full sets and write them back: concurrent toggles
        by different users on the same comment must all be kept.

        Args:
            comment_id: Comment ID
            user_id: Voting user
            action: Like or dislike

        Returns:
            Updated comment, None if it doesn't exist
        """
        pass

    @abstractmethod
    async def soft_delete(self, comment_id: CommentId) -> Optional[Comment]:
        """Mark a comment as deleted. Nothing is purged.

        Args:
            comment_id: Comment ID

        Returns:
            Updated comment, None if it doesn't exist
        """
        pass

    @abstractmethod
    async def statistics(self) -> CommentStatistics:
        """Aggregate counters over all comments."""
        pass

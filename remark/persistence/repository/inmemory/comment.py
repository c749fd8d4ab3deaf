"""In-memory comment repository for testing."""

from typing import Optional

from remark.domain.model import Comment, CommentStatistics
from remark.domain.model.common import utcnow
from remark.domain.repository.comment import CommentRepository
from remark.domain.value import CommentId, CommentSortOrder, UserId, VoteAction


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Mutations never await between reading and replacing a comment, so each
    one is atomic with respect to other coroutines on the same loop.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    def _replace(self, comment_id: CommentId, **changes) -> Optional[Comment]:
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        updated = comment.model_copy(update={**changes, "updated_at": utcnow()})
        self._comments[comment_id] = updated
        return updated

    def _siblings(self, parent_id: Optional[CommentId]) -> list[Comment]:
        return [c for c in self._comments.values() if c.parent_id == parent_id]

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_all(
        self,
        parent_id: Optional[CommentId] = None,
        sort: CommentSortOrder = CommentSortOrder.NEWEST,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Comment]:
        """Find comments sharing a parent, sorted and paginated."""
        comments = self._siblings(parent_id)

        # Sort by created_at first so popularity sorts (stable) keep newest-first ties
        if sort == CommentSortOrder.OLDEST:
            comments.sort(key=lambda c: c.created_at)
        else:
            comments.sort(key=lambda c: c.created_at, reverse=True)

        if sort == CommentSortOrder.MOST_LIKED:
            comments.sort(key=lambda c: len(c.liked_by), reverse=True)
        elif sort == CommentSortOrder.MOST_DISLIKED:
            comments.sort(key=lambda c: len(c.disliked_by), reverse=True)

        # Paginate
        return comments[offset : offset + limit]

    async def count(self, parent_id: Optional[CommentId] = None) -> int:
        """Count comments sharing a parent."""
        return len(self._siblings(parent_id))

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._comments[comment.id] = comment
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace content and bump updated_at."""
        return self._replace(comment_id, content=content)

    async def set_vote_sets(
        self,
        comment_id: CommentId,
        liked_by: frozenset[UserId],
        disliked_by: frozenset[UserId],
    ) -> Optional[Comment]:
        """Replace both vote sets."""
        return self._replace(
            comment_id, liked_by=frozenset(liked_by), disliked_by=frozenset(disliked_by)
        )

    async def toggle_vote(
        self, comment_id: CommentId, user_id: UserId, action: VoteAction
    ) -> Optional[Comment]:
        """Toggle a user's vote."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        toggled = comment.toggled_vote(user_id, action)
        return self._replace(
            comment_id, liked_by=toggled.liked_by, disliked_by=toggled.disliked_by
        )

    async def soft_delete(self, comment_id: CommentId) -> Optional[Comment]:
        """Mark a comment as deleted."""
        return self._replace(comment_id, is_deleted=True)

    async def statistics(self) -> CommentStatistics:
        """Aggregate counters over all comments."""
        comments = list(self._comments.values())
        top_level = sum(1 for c in comments if c.parent_id is None)
        return CommentStatistics(
            total=len(comments),
            top_level=top_level,
            replies=len(comments) - top_level,
            deleted=sum(1 for c in comments if c.is_deleted),
            total_likes=sum(len(c.liked_by) for c in comments),
            total_dislikes=sum(len(c.disliked_by) for c in comments),
        )

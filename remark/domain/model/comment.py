"""Comment entity.

Comments form threads through a self-referencing parent pointer. Depth is
unbounded in storage, but the service only ever reads one level at a time
("children of X").
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from remark.domain.model.common import DomainModel, utcnow
from remark.domain.value import (
    CONTENT_MAX_LENGTH,
    CONTENT_MIN_LENGTH,
    CommentId,
    UserId,
    VoteAction,
    VoteState,
)


class Comment(DomainModel):
    """Comment entity.

    Represents a top-level comment or a reply to another comment.

    Voting is stored as two disjoint sets of user IDs:
    - liked_by: users who currently like the comment
    - disliked_by: users who currently dislike the comment

    Counts are never stored; they are derived from the sets at read time
    (see CommentView).
    """

    id: CommentId
    author_id: UserId
    content: str = Field(min_length=CONTENT_MIN_LENGTH, max_length=CONTENT_MAX_LENGTH)
    parent_id: Optional[CommentId] = None
    liked_by: frozenset[UserId] = frozenset()
    disliked_by: frozenset[UserId] = frozenset()
    is_deleted: bool = False
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @model_validator(mode="after")
    def check_vote_sets_disjoint(self) -> "Comment":
        """A user can never like and dislike the same comment."""
        overlap = self.liked_by & self.disliked_by
        if overlap:
            raise ValueError(
                f"Users cannot both like and dislike a comment: {sorted(map(str, overlap))}"
            )
        return self

    @property
    def is_reply(self) -> bool:
        return self.parent_id is not None

    def vote_state_of(self, user_id: UserId) -> VoteState:
        """Return the given user's vote state on this comment."""
        if user_id in self.liked_by:
            return VoteState.LIKED
        if user_id in self.disliked_by:
            return VoteState.DISLIKED
        return VoteState.NEUTRAL

    def toggled_vote(self, user_id: UserId, action: VoteAction) -> "Comment":
        """Return a copy of this comment with the user's vote toggled.

        Transitions (dislike is symmetric with the sets swapped):
        - neutral  --like--> liked
        - liked    --like--> neutral
        - disliked --like--> liked (moves the user between sets in one step)

        Args:
            user_id: Voting user
            action: Like or dislike

        Returns:
            New Comment with updated vote sets (timestamps untouched)
        """
        liked = set(self.liked_by)
        disliked = set(self.disliked_by)
        same, opposite = (liked, disliked) if action == VoteAction.LIKE else (disliked, liked)

        if user_id in same:
            same.discard(user_id)
        else:
            opposite.discard(user_id)
            same.add(user_id)

        return self.model_copy(
            update={"liked_by": frozenset(liked), "disliked_by": frozenset(disliked)}
        )

"""Domain value types for Remark.

Value types are immutable and defined by their values, not identity.
"""

from enum import Enum

CONTENT_MIN_LENGTH = 1
CONTENT_MAX_LENGTH = 2000


class VoteAction(str, Enum):
    """Action a user takes on a comment."""

    LIKE = "like"
    DISLIKE = "dislike"


class VoteState(str, Enum):
    """A user's current vote on a single comment.

    A user is in exactly one of these states per comment.
    """

    NEUTRAL = "neutral"
    LIKED = "liked"
    DISLIKED = "disliked"


class CommentSortOrder(str, Enum):
    """Sort order for comment listings.

    Wire values match the query-string values clients send.
    """

    NEWEST = "newest"  # created_at DESC
    OLDEST = "oldest"  # created_at ASC
    MOST_LIKED = "mostLiked"  # like count DESC, created_at DESC
    MOST_DISLIKED = "mostDisliked"  # dislike count DESC, created_at DESC

"""Domain services."""

from .base import Service
from .comment_service import CommentService, validate_content
from .jwt_service import JWTService
from .ownership_service import OwnershipService
from .thread_service import ThreadService
from .vote_service import VoteService

__all__ = [
    "CommentService",
    "JWTService",
    "OwnershipService",
    "Service",
    "ThreadService",
    "VoteService",
    "validate_content",
]

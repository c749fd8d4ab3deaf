"""Strongly typed identifiers for Remark domain entities.

Using NewType keeps comment and user IDs from being mixed up while
staying plain UUIDs at runtime.
"""

from typing import NewType
from uuid import UUID

CommentId = NewType("CommentId", UUID)
UserId = NewType("UserId", UUID)

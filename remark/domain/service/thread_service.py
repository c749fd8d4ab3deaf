"""Thread query domain service.

Builds paginated, sorted read projections (CommentView) of comments. Counts
and the viewer's vote flags are derived here from the stored vote sets.
"""

import logfire

from remark.domain.model import CommentPage, CommentStatistics, CommentView, PageMeta
from remark.domain.repository import CommentRepository
from remark.domain.value import CommentId, CommentSortOrder, UserId

from .base import Service
from .comment_service import CommentService


class ThreadService(Service):
    """Domain service for comment listings and single-comment views."""

    def __init__(
        self, comment_repository: CommentRepository, comment_service: CommentService
    ) -> None:
        """Initialize thread service.

        Args:
            comment_repository: Comment repository
            comment_service: Comment domain service
        """
        self.comment_repository = comment_repository
        self.comment_service = comment_service

    async def list_comments(
        self,
        page: int,
        page_size: int,
        sort: CommentSortOrder = CommentSortOrder.NEWEST,
        viewer_id: UserId | None = None,
        parent_id: CommentId | None = None,
    ) -> CommentPage:
        """List top-level comments (or the children of one parent).

        Args:
            page: 1-based page number
            page_size: Comments per page
            sort: newest, oldest, mostLiked or mostDisliked
            viewer_id: User whose vote flags to include (optional)
            parent_id: Restrict to replies of this comment instead of top-level

        Returns:
            Page of comment views with pagination metadata
        """
        with logfire.span(
            "thread_service.list_comments",
            page=page,
            page_size=page_size,
            sort=sort.value,
            parent_id=str(parent_id) if parent_id else None,
        ):
            # Total is counted separately from the page fetch
            total = await self.comment_repository.count(parent_id=parent_id)
            comments = await self.comment_repository.find_all(
                parent_id=parent_id,
                sort=sort,
                limit=page_size,
                offset=(page - 1) * page_size,
            )

            logfire.info("Comments listed", count=len(comments), total=total)
            return CommentPage(
                items=[CommentView.from_comment(c, viewer_id) for c in comments],
                meta=PageMeta.build(page=page, page_size=page_size, total=total),
            )

    async def list_replies(
        self,
        parent_id: CommentId,
        page: int,
        page_size: int,
        viewer_id: UserId | None = None,
    ) -> CommentPage:
        """List the direct replies of a comment, newest first.

        Replies are never re-sorted by popularity. An unknown parent simply
        has no replies.

        Args:
            parent_id: Parent comment ID
            page: 1-based page number
            page_size: Replies per page
            viewer_id: User whose vote flags to include (optional)

        Returns:
            Page of reply views with pagination metadata
        """
        replies, total = await self.comment_service.find_children(
            parent_id=parent_id, page=page, page_size=page_size
        )
        return CommentPage(
            items=[CommentView.from_comment(c, viewer_id) for c in replies],
            meta=PageMeta.build(page=page, page_size=page_size, total=total),
        )

    async def get_one(
        self, comment_id: CommentId, viewer_id: UserId | None = None
    ) -> CommentView:
        """Get a single comment view, including soft-deleted comments.

        Raises:
            NotFoundError: If comment doesn't exist
        """
        comment = await self.comment_service.require_comment(comment_id)
        return CommentView.from_comment(comment, viewer_id)

    async def statistics(self) -> CommentStatistics:
        """Aggregate comment and vote counters."""
        with logfire.span("thread_service.statistics"):
            return await self.comment_repository.statistics()

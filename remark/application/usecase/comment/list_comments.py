"""List comments use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from remark.config import PaginationSettings
from remark.domain.error import ValidationError
from remark.domain.service import ThreadService
from remark.domain.value import CommentId, CommentSortOrder, UserId

from .item import CommentItem, CommentListResponse, PageMetaItem


class ListCommentsRequest(BaseModel):
    """List comments request."""

    page: int = Field(default=1, ge=1)
    page_size: int | None = Field(default=None, ge=1)  # None = configured default
    sort: CommentSortOrder = CommentSortOrder.NEWEST
    parent_id: str | None = None  # Filter by parent instead of top-level
    user_id: str | None = None  # Current user ID (if authenticated)


class ListCommentsUseCase:
    """Use case for listing top-level comments with sorting and pagination."""

    def __init__(
        self, thread_service: ThreadService, pagination: PaginationSettings
    ) -> None:
        """Initialize list comments use case.

        Args:
            thread_service: Thread query domain service
            pagination: Pagination defaults and limits
        """
        self.thread_service = thread_service
        self.pagination = pagination

    async def execute(self, request: ListCommentsRequest) -> CommentListResponse:
        """Execute list comments flow.

        Args:
            request: List comments request with sort, filter and pagination

        Returns:
            Page of comments and pagination metadata

        Raises:
            ValidationError: If page_size exceeds the configured maximum
        """
        page_size = request.page_size or self.pagination.default_page_size
        if page_size > self.pagination.max_page_size:
            raise ValidationError(
                f"page_size must be at most {self.pagination.max_page_size}"
            )

        with logfire.span(
            "list_comments.execute",
            sort=request.sort.value,
            page=request.page,
            page_size=page_size,
        ):
            result = await self.thread_service.list_comments(
                page=request.page,
                page_size=page_size,
                sort=request.sort,
                viewer_id=UserId(UUID(request.user_id)) if request.user_id else None,
                parent_id=CommentId(UUID(request.parent_id))
                if request.parent_id
                else None,
            )

            return CommentListResponse(
                comments=[CommentItem.from_view(view) for view in result.items],
                meta=PageMetaItem.from_meta(result.meta),
            )

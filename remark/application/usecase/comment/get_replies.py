"""Get replies use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from remark.config import PaginationSettings
from remark.domain.error import ValidationError
from remark.domain.service import ThreadService
from remark.domain.value import CommentId, UserId

from .item import CommentItem, CommentListResponse, PageMetaItem


class GetRepliesRequest(BaseModel):
    """Get replies request."""

    comment_id: str  # Parent comment UUID string
    page: int = Field(default=1, ge=1)
    page_size: int | None = Field(default=None, ge=1)  # None = configured default
    user_id: str | None = None  # Current user ID (if authenticated)


class GetRepliesUseCase:
    """Use case for paging through a comment's direct replies (newest first)."""

    def __init__(
        self, thread_service: ThreadService, pagination: PaginationSettings
    ) -> None:
        """Initialize get replies use case.

        Args:
            thread_service: Thread query domain service
            pagination: Pagination defaults and limits
        """
        self.thread_service = thread_service
        self.pagination = pagination

    async def execute(self, request: GetRepliesRequest) -> CommentListResponse:
        """Execute get replies flow.

        Raises:
            ValidationError: If page_size exceeds the configured maximum
        """
        page_size = request.page_size or self.pagination.default_reply_page_size
        if page_size > self.pagination.max_page_size:
            raise ValidationError(
                f"page_size must be at most {self.pagination.max_page_size}"
            )

        result = await self.thread_service.list_replies(
            parent_id=CommentId(UUID(request.comment_id)),
            page=request.page,
            page_size=page_size,
            viewer_id=UserId(UUID(request.user_id)) if request.user_id else None,
        )

        return CommentListResponse(
            comments=[CommentItem.from_view(view) for view in result.items],
            meta=PageMetaItem.from_meta(result.meta),
        )

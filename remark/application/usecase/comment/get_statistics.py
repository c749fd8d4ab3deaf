"""Comment statistics use case."""

from pydantic import BaseModel

from remark.domain.service import ThreadService


class CommentStatisticsResponse(BaseModel):
    """Comment statistics response."""

    total: int
    top_level: int
    replies: int
    deleted: int
    total_likes: int
    total_dislikes: int


class GetCommentStatisticsUseCase:
    """Use case for reporting aggregate comment and vote counts."""

    def __init__(self, thread_service: ThreadService) -> None:
        self.thread_service = thread_service

    async def execute(self) -> CommentStatisticsResponse:
        stats = await self.thread_service.statistics()
        return CommentStatisticsResponse(**stats.model_dump())

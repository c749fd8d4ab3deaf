"""Application layer DI providers."""

from dishka import Scope, provide

from remark.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentStatisticsUseCase,
    GetCommentUseCase,
    GetRepliesUseCase,
    ListCommentsUseCase,
    UpdateCommentUseCase,
)
from remark.application.usecase.vote import ToggleVoteUseCase
from remark.config import PaginationSettings
from remark.domain.service import (
    CommentService,
    OwnershipService,
    ThreadService,
    VoteService,
)
from remark.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self, thread_service: ThreadService, pagination: PaginationSettings
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(thread_service=thread_service, pagination=pagination)

    @provide(scope=Scope.REQUEST)
    def get_get_comment_use_case(
        self, thread_service: ThreadService
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_get_replies_use_case(
        self, thread_service: ThreadService, pagination: PaginationSettings
    ) -> GetRepliesUseCase:
        """Provide get replies use case."""
        return GetRepliesUseCase(thread_service=thread_service, pagination=pagination)

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, ownership_service: OwnershipService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(ownership_service=ownership_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, ownership_service: OwnershipService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(ownership_service=ownership_service)

    @provide(scope=Scope.REQUEST)
    def get_comment_statistics_use_case(
        self, thread_service: ThreadService
    ) -> GetCommentStatisticsUseCase:
        """Provide comment statistics use case."""
        return GetCommentStatisticsUseCase(thread_service=thread_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_vote_use_case(self, vote_service: VoteService) -> ToggleVoteUseCase:
        """Provide toggle vote use case."""
        return ToggleVoteUseCase(vote_service=vote_service)

"""Domain layer DI providers."""

from dishka import Scope, provide

from remark.config import AuthSettings
from remark.domain.repository import CommentRepository
from remark.domain.service import (
    CommentService,
    JWTService,
    OwnershipService,
    ThreadService,
    VoteService,
)
from remark.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_vote_service(self, comment_repository: CommentRepository) -> VoteService:
        """Provide vote toggle domain service."""
        return VoteService(comment_repository=comment_repository)

    @provide
    def get_thread_service(
        self,
        comment_repository: CommentRepository,
        comment_service: CommentService,
    ) -> ThreadService:
        """Provide thread query domain service."""
        return ThreadService(
            comment_repository=comment_repository,
            comment_service=comment_service,
        )

    @provide
    def get_ownership_service(
        self, comment_service: CommentService
    ) -> OwnershipService:
        """Provide ownership and lifecycle domain service."""
        return OwnershipService(comment_service=comment_service)

"""Domain layer DI providers."""

from dishka import Scope, provide

from conduit.config import AuthSettings
from conduit.domain.repository import (
    ArticleRepository,
    CommentRepository,
    FollowRepository,
    UserRepository,
)
from conduit.domain.service import (
    ArticleService,
    CommentService,
    JWTService,
    PasswordHasher,
    ProfileService,
    UserService,
)
from conduit.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances sharing one transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        auth_settings: AuthSettings,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            password_hasher=password_hasher,
            min_password_length=auth_settings.min_password_length,
        )

    @provide
    def get_article_service(
        self, article_repository: ArticleRepository
    ) -> ArticleService:
        """Provide article domain service."""
        return ArticleService(article_repository=article_repository)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        article_repository: ArticleRepository,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            article_repository=article_repository,
        )

    @provide
    def get_profile_service(
        self, user_repository: UserRepository, follow_repository: FollowRepository
    ) -> ProfileService:
        """Provide profile/follow domain service."""
        return ProfileService(
            user_repository=user_repository, follow_repository=follow_repository
        )

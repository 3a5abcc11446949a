"""Application layer DI providers."""

from dishka import Scope, provide

from conduit.application.query import ArticleQueries, CommentQueries, ProfileQueries
from conduit.application.usecase.article import (
    CreateArticleUseCase,
    DeleteArticleUseCase,
    FavoriteArticleUseCase,
    FeedArticlesUseCase,
    GetArticleUseCase,
    ListArticlesUseCase,
    UnfavoriteArticleUseCase,
    UpdateArticleUseCase,
)
from conduit.application.usecase.comment import (
    AddCommentUseCase,
    DeleteCommentUseCase,
    ListCommentsUseCase,
)
from conduit.application.usecase.profile import (
    FollowUserUseCase,
    GetProfileUseCase,
    UnfollowUserUseCase,
)
from conduit.application.usecase.tag import ListTagsUseCase
from conduit.application.usecase.user import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUserUseCase,
    UpdateUserUseCase,
)
from conduit.config import PaginationSettings
from conduit.domain.service import (
    ArticleService,
    CommentService,
    JWTService,
    ProfileService,
    UserService,
)
from conduit.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # User use cases
    @provide
    def get_register_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> RegisterUserUseCase:
        """Provide register use case."""
        return RegisterUserUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide
    def get_login_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide
    def get_current_user_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            user_service=user_service, jwt_service=jwt_service
        )

    @provide
    def get_update_user_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> UpdateUserUseCase:
        """Provide update user use case."""
        return UpdateUserUseCase(user_service=user_service, jwt_service=jwt_service)

    # Profile use cases
    @provide
    def get_profile_use_case(
        self, profile_queries: ProfileQueries
    ) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(profile_queries=profile_queries)

    @provide
    def get_follow_user_use_case(
        self, profile_service: ProfileService, profile_queries: ProfileQueries
    ) -> FollowUserUseCase:
        """Provide follow use case."""
        return FollowUserUseCase(
            profile_service=profile_service, profile_queries=profile_queries
        )

    @provide
    def get_unfollow_user_use_case(
        self, profile_service: ProfileService, profile_queries: ProfileQueries
    ) -> UnfollowUserUseCase:
        """Provide unfollow use case."""
        return UnfollowUserUseCase(
            profile_service=profile_service, profile_queries=profile_queries
        )

    # Article use cases
    @provide
    def get_create_article_use_case(
        self, article_service: ArticleService, article_queries: ArticleQueries
    ) -> CreateArticleUseCase:
        """Provide create article use case."""
        return CreateArticleUseCase(
            article_service=article_service, article_queries=article_queries
        )

    @provide
    def get_get_article_use_case(
        self, article_queries: ArticleQueries
    ) -> GetArticleUseCase:
        """Provide get article use case."""
        return GetArticleUseCase(article_queries=article_queries)

    @provide
    def get_list_articles_use_case(
        self, article_queries: ArticleQueries, pagination: PaginationSettings
    ) -> ListArticlesUseCase:
        """Provide list articles use case."""
        return ListArticlesUseCase(
            article_queries=article_queries, pagination=pagination
        )

    @provide
    def get_feed_articles_use_case(
        self, article_queries: ArticleQueries, pagination: PaginationSettings
    ) -> FeedArticlesUseCase:
        """Provide feed use case."""
        return FeedArticlesUseCase(
            article_queries=article_queries, pagination=pagination
        )

    @provide
    def get_update_article_use_case(
        self, article_service: ArticleService, article_queries: ArticleQueries
    ) -> UpdateArticleUseCase:
        """Provide update article use case."""
        return UpdateArticleUseCase(
            article_service=article_service, article_queries=article_queries
        )

    @provide
    def get_delete_article_use_case(
        self, article_service: ArticleService
    ) -> DeleteArticleUseCase:
        """Provide delete article use case."""
        return DeleteArticleUseCase(article_service=article_service)

    @provide
    def get_favorite_article_use_case(
        self, article_service: ArticleService, article_queries: ArticleQueries
    ) -> FavoriteArticleUseCase:
        """Provide favorite use case."""
        return FavoriteArticleUseCase(
            article_service=article_service, article_queries=article_queries
        )

    @provide
    def get_unfavorite_article_use_case(
        self, article_service: ArticleService, article_queries: ArticleQueries
    ) -> UnfavoriteArticleUseCase:
        """Provide unfavorite use case."""
        return UnfavoriteArticleUseCase(
            article_service=article_service, article_queries=article_queries
        )

    # Comment use cases
    @provide
    def get_add_comment_use_case(
        self, comment_service: CommentService, comment_queries: CommentQueries
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(
            comment_service=comment_service, comment_queries=comment_queries
        )

    @provide
    def get_list_comments_use_case(
        self, comment_queries: CommentQueries
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(comment_queries=comment_queries)

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Tag use cases
    @provide
    def get_list_tags_use_case(
        self, article_service: ArticleService
    ) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(article_service=article_service)

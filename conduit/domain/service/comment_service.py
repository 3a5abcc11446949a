"""Comment domain service."""

import logfire
from pydantic import ValidationError as PydanticValidationError

from conduit.domain.error import ForbiddenError, NotFoundError, ValidationError
from conduit.domain.model import Article, Comment
from conduit.domain.repository import ArticleRepository, CommentRepository
from conduit.domain.value import CommentId, Slug, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment commands.

    Comments are their own aggregate; the article is only read to resolve
    the slug and is never modified here.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        article_repository: ArticleRepository,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            article_repository: Article repository (slug lookups only)
        """
        self.comment_repository = comment_repository
        self.article_repository = article_repository

    async def add_comment(
        self, user_id: UserId, article_slug: Slug, body: str
    ) -> Comment:
        """Add a comment to an article.

        Args:
            user_id: Author's user ID
            article_slug: Slug of the article being commented on
            body: Comment text

        Returns:
            Created comment with its ID

        Raises:
            NotFoundError: If no article has this slug
            ValidationError: If the body is blank
        """
        with logfire.span(
            "comment_service.add_comment",
            user_id=str(user_id),
            slug=article_slug.root,
        ):
            article = await self._get_article(article_slug)

            try:
                comment = Comment(article_id=article.id, author_id=user_id, body=body)
            except PydanticValidationError as e:
                raise ValidationError.from_pydantic(e)

            created = await self.comment_repository.create(comment)
            logfire.info(
                "Comment created",
                comment_id=str(created.id),
                article_id=str(article.id),
            )
            return created

    async def delete_comment(
        self, user_id: UserId, article_slug: Slug, comment_id: CommentId
    ) -> None:
        """Delete a comment through the article it belongs to.

        Args:
            user_id: Caller's user ID
            article_slug: Slug of the article the comment should belong to
            comment_id: ID of the comment to delete

        Raises:
            NotFoundError: If the article or comment is missing, or the
                comment belongs to a different article
            ForbiddenError: If the caller is not the comment's author
        """
        with logfire.span(
            "comment_service.delete_comment",
            user_id=str(user_id),
            slug=article_slug.root,
            comment_id=str(comment_id),
        ):
            article = await self._get_article(article_slug)

            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            if not comment.belongs_to(article.id):
                logfire.warn(
                    "Comment does not belong to article",
                    comment_id=str(comment_id),
                    article_id=str(article.id),
                )
                raise NotFoundError("Comment", str(comment_id))

            if not comment.can_be_deleted_by(user_id):
                logfire.warn(
                    "Comment deletion forbidden",
                    comment_id=str(comment_id),
                    user_id=str(user_id),
                )
                raise ForbiddenError("You can only delete your own comments")

            await self.comment_repository.delete_by_id(comment_id)
            logfire.info("Comment deleted", comment_id=str(comment_id))

    async def _get_article(self, slug: Slug) -> Article:
        article = await self.article_repository.find_by_slug(slug)
        if not article:
            logfire.warn("Article not found", slug=slug.root)
            raise NotFoundError("Article", slug.root)
        return article

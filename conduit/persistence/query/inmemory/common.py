"""Projection helpers over the in-memory store."""

from typing import Optional

from conduit.application.query import ArticleView, ProfileView
from conduit.domain.model import Article, User
from conduit.domain.value import UserId
from conduit.persistence.repository.inmemory import InMemoryStore


def profile_view(
    store: InMemoryStore, user: User, viewer_id: Optional[UserId]
) -> ProfileView:
    following = viewer_id is not None and (viewer_id, user.id) in store.follows
    return ProfileView(
        username=user.username.root,
        bio=user.bio,
        image=user.image,
        following=following,
    )


def article_view(
    store: InMemoryStore, article: Article, viewer_id: Optional[UserId]
) -> ArticleView:
    fans = {
        user_id
        for user_id, article_id in store.favorites
        if article_id == article.id
    }
    return ArticleView(
        slug=str(article.slug),
        title=article.title,
        description=article.description,
        body=article.body,
        tag_list=sorted(article.tags),
        created_at=article.created_at,
        updated_at=article.updated_at,
        favorited=viewer_id is not None and viewer_id in fans,
        favorites_count=len(fans),
        author=profile_view(store, store.users[article.author_id], viewer_id),
    )

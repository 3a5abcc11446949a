"""Shared in-memory state for repositories and queries."""

from dataclasses import dataclass, field

from conduit.domain.model import Article, Comment, User
from conduit.domain.value import ArticleId, CommentId, UserId


@dataclass
class InMemoryStore:
    """Tables held as dicts and sets.

    One store is shared by the in-memory repositories and queries of a
    container, so reads observe writes the way they would against a database.
    """

    users: dict[UserId, User] = field(default_factory=dict)
    articles: dict[ArticleId, Article] = field(default_factory=dict)
    comments: dict[CommentId, Comment] = field(default_factory=dict)
    tags: set[str] = field(default_factory=set)
    favorites: set[tuple[UserId, ArticleId]] = field(default_factory=set)
    follows: set[tuple[UserId, UserId]] = field(default_factory=set)

    def snapshot(self) -> "InMemoryStore":
        """Copy the tables; stored models are immutable, so copies stay valid."""
        return InMemoryStore(
            users=dict(self.users),
            articles=dict(self.articles),
            comments=dict(self.comments),
            tags=set(self.tags),
            favorites=set(self.favorites),
            follows=set(self.follows),
        )

    def restore(self, snapshot: "InMemoryStore") -> None:
        """Replace every table with the one held by ``snapshot``."""
        copy = snapshot.snapshot()
        self.users = copy.users
        self.articles = copy.articles
        self.comments = copy.comments
        self.tags = copy.tags
        self.favorites = copy.favorites
        self.follows = copy.follows

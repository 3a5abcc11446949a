"""SQLAlchemy table definitions for Conduit.

Repositories and queries use SQLAlchemy Core against these tables.
They match the schema defined in Alembic migrations. Column types are
the generic ones so the same metadata also builds a SQLite test schema.
"""

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    Uuid,
    func,
)

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("email", String(255), nullable=False, unique=True),
    Column("username", String(50), nullable=False, unique=True),
    Column("password_hash", String(255), nullable=False),
    Column("bio", Text, nullable=True),
    Column("image", Text, nullable=True),
    Column("created_at", DateTime, nullable=False, server_default=func.now()),
    Column("updated_at", DateTime, nullable=False, server_default=func.now()),
)

# ============================================================================
# ARTICLES TABLE
# ============================================================================
articles_table = Table(
    "articles",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("slug", String(255), nullable=False, unique=True),
    Column("title", String(255), nullable=False),
    Column("description", Text, nullable=False),
    Column("body", Text, nullable=False),
    Column(
        "author_id", Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("created_at", DateTime, nullable=False, server_default=func.now()),
    Column("updated_at", DateTime, nullable=False, server_default=func.now()),
)

Index("idx_articles_created_at", articles_table.c.created_at.desc())
Index("idx_articles_author_id", articles_table.c.author_id)

# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("name", String(100), nullable=False, unique=True),
)

# ============================================================================
# ARTICLE_TAGS TABLE (junction table for many-to-many relationship)
# ============================================================================
article_tags_table = Table(
    "article_tags",
    metadata,
    Column(
        "article_id",
        Uuid,
        ForeignKey("articles.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "tag_id", Uuid, ForeignKey("tags.id", ondelete="RESTRICT"), primary_key=True
    ),
)

Index("idx_article_tags_tag_id", article_tags_table.c.tag_id)

# ============================================================================
# FAVORITES TABLE (user -> article edges)
# ============================================================================
favorites_table = Table(
    "favorites",
    metadata,
    Column(
        "article_id",
        Uuid,
        ForeignKey("articles.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "user_id", Uuid, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True
    ),
    Column("created_at", DateTime, nullable=False, server_default=func.now()),
)

Index("idx_favorites_user_id", favorites_table.c.user_id)

# ============================================================================
# FOLLOWERS TABLE (follower -> followee edges)
# ============================================================================
followers_table = Table(
    "followers",
    metadata,
    Column(
        "follower_id",
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "followee_id",
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("created_at", DateTime, nullable=False, server_default=func.now()),
    UniqueConstraint("follower_id", "followee_id", name="uq_follower_followee"),
)

Index("idx_followers_followee_id", followers_table.c.followee_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column(
        "article_id",
        Uuid,
        ForeignKey("articles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id", Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("body", Text, nullable=False),
    Column("created_at", DateTime, nullable=False, server_default=func.now()),
    Column("updated_at", DateTime, nullable=False, server_default=func.now()),
)

Index("idx_comments_article_id", comments_table.c.article_id)
Index("idx_comments_created_at", comments_table.c.created_at)

"""Domain services."""

from .article_service import ArticleService
from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .password import PasswordHasher
from .profile_service import ProfileService
from .slug import generate_unique_slug, slugify
from .user_service import UserService

__all__ = [
    "ArticleService",
    "CommentService",
    "JWTService",
    "PasswordHasher",
    "ProfileService",
    "Service",
    "UserService",
    "generate_unique_slug",
    "slugify",
]

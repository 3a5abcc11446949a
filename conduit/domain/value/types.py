"""Domain value objects for Conduit.

Value objects are immutable and defined by their values, not identity.
They validate themselves on construction; an invalid value raises
pydantic's ValidationError.
"""

import re

from pydantic import field_validator

from conduit.domain.value.common import RootValueObject

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")
USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9_-]+$")
SLUG_PATTERN = re.compile(r"^[a-z0-9-]+$")

MAX_EMAIL_LENGTH = 255
MIN_USERNAME_LENGTH = 3
MAX_USERNAME_LENGTH = 50
MAX_SLUG_LENGTH = 255
MAX_TAG_LENGTH = 100


class Email(RootValueObject[str]):
    """Email address, normalized to trimmed lowercase.

    Examples: 'jake@jake.jake', 'jane.doe+conduit@example.org'
    """

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Normalize and validate email format."""
        v = v.strip().lower()
        if not v:
            raise ValueError("Email must not be blank")
        if len(v) > MAX_EMAIL_LENGTH:
            raise ValueError(f"Email must be at most {MAX_EMAIL_LENGTH} characters")
        if not EMAIL_PATTERN.match(v):
            raise ValueError("Email must be a valid email address")
        return v


class Username(RootValueObject[str]):
    """Public user name.

    3-50 characters: letters, digits, underscores and hyphens.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username length and charset."""
        if not v.strip():
            raise ValueError("Username must not be blank")
        if not MIN_USERNAME_LENGTH <= len(v) <= MAX_USERNAME_LENGTH:
            raise ValueError(
                f"Username must be between {MIN_USERNAME_LENGTH} "
                f"and {MAX_USERNAME_LENGTH} characters"
            )
        if not USERNAME_PATTERN.match(v):
            raise ValueError(
                "Username can only contain letters, numbers, underscores and hyphens"
            )
        return v


class Slug(RootValueObject[str]):
    """URL-safe article identifier.

    Lowercase alphanumerics and hyphens, 1-255 characters.
    Examples: 'how-to-train-your-dragon', 'how-to-train-your-dragon-2'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if not v:
            raise ValueError("Slug must not be blank")
        if len(v) > MAX_SLUG_LENGTH:
            raise ValueError(f"Slug must be at most {MAX_SLUG_LENGTH} characters")
        if not SLUG_PATTERN.match(v):
            raise ValueError(
                "Slug must contain only lowercase letters, numbers and hyphens"
            )
        return v


def normalize_tag_name(v: str) -> str:
    """Trim a tag name and check its length.

    Raises:
        ValueError: If the name is blank or too long
    """
    v = v.strip()
    if not v:
        raise ValueError("Tag must not be blank")
    if len(v) > MAX_TAG_LENGTH:
        raise ValueError(f"Tag must be at most {MAX_TAG_LENGTH} characters")
    return v


class TagName(RootValueObject[str]):
    """Tag name for categorizing articles.

    Free text, trimmed, at most 100 characters.
    Examples: 'dragons', 'training', 'python'
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Trim and validate tag name."""
        return normalize_tag_name(v)

"""Slug generation.

Turns free text into a URL-safe slug and resolves collisions against a
caller-supplied existence check. Nothing here touches storage; the only
I/O happens inside the check the caller passes in.
"""

import re
import unicodedata
from collections.abc import Awaitable, Callable
from typing import Optional

import logfire

from conduit.domain.value import Slug
from conduit.domain.value.types import MAX_SLUG_LENGTH

SlugExists = Callable[[Slug], Awaitable[bool]]

_INVALID_CHARS = re.compile(r"[^a-z0-9\s-]", re.ASCII)
_WHITESPACE = re.compile(r"\s+", re.ASCII)
_HYPHENS = re.compile(r"-+")


def slugify(text: str) -> str:
    """Convert text to a base slug.

    - Decomposes accented characters (NFD) and drops combining marks
    - Lowercases
    - Removes everything outside [a-z0-9], whitespace and hyphens
    - Collapses whitespace runs into one hyphen, then repeated hyphens
    - Strips leading/trailing hyphens

    Args:
        text: Text to slugify (usually an article title)

    Returns:
        Base slug; empty if the text has no transliterable characters
    """
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    slug = _INVALID_CHARS.sub("", stripped.lower()).strip()
    slug = _WHITESPACE.sub("-", slug)
    slug = _HYPHENS.sub("-", slug)
    return slug.strip("-")


async def generate_unique_slug(
    title: str, exists: SlugExists, fallback: Optional[str] = None
) -> Slug:
    """Generate a slug for ``title`` that ``exists`` reports as free.

    Tries the base slug first, then ``base-2``, ``base-3``, ... until the
    check returns False.

    Args:
        title: Text to derive the slug from
        exists: Async predicate telling whether a slug is already taken
        fallback: Base to use when the title yields an empty slug

    Returns:
        First candidate the check reports as free

    Raises:
        ValueError: If the title yields an empty slug and no fallback is given
    """
    with logfire.span("slug.generate_unique_slug", title=title):
        base = slugify(title)
        if not base:
            if not fallback:
                raise ValueError("Cannot derive a slug from an empty title")
            logfire.info("Using fallback slug for empty title", slug=fallback)
            base = fallback
        base = base[:MAX_SLUG_LENGTH].rstrip("-")

        candidate = Slug(base)
        counter = 2
        while await exists(candidate):
            suffix = f"-{counter}"
            # Keep room for the suffix within the slug length limit
            candidate = Slug(base[: MAX_SLUG_LENGTH - len(suffix)].rstrip("-") + suffix)
            logfire.debug(
                "Slug collision, trying with suffix",
                base_slug=base,
                attempt=candidate.root,
            )
            counter += 1

        logfire.info(
            "Generated unique slug",
            slug=candidate.root,
            had_collision=counter > 2,
        )
        return candidate

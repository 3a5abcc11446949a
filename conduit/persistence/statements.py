"""Dialect-aware statement helpers."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Mapping, Sequence

import logfire
from sqlalchemy import Table
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from conduit.domain.error import ValidationError

_INSERTS = {
    "postgresql": postgresql_insert,
    "sqlite": sqlite_insert,
}


async def insert_ignore(
    session: AsyncSession,
    table: Table,
    values: Mapping[str, Any] | Sequence[Mapping[str, Any]],
) -> None:
    """Insert rows, silently skipping any that violate a unique constraint.

    Emits ``INSERT ... ON CONFLICT DO NOTHING`` so idempotent edges (follows,
    favorites, tag links) need no read-before-write.

    Args:
        session: Active session
        table: Target table
        values: One row or a list of rows
    """
    if not values:
        return

    dialect = session.get_bind().dialect.name
    insert = _INSERTS.get(dialect)
    if insert is None:
        raise NotImplementedError(f"insert_ignore is not supported for {dialect}")

    stmt = insert(table).values(values).on_conflict_do_nothing()
    await session.execute(stmt)


def _violated_columns(error: IntegrityError, columns: Sequence[str]) -> list[str]:
    # PostgreSQL: constraint "uq_articles_slug", "Key (slug)=(...) already exists"
    # SQLite: "UNIQUE constraint failed: articles.slug"
    message = str(error.orig)
    return [
        column
        for column in columns
        if f"({column})" in message
        or f".{column}" in message
        or f"_{column}\"" in message
    ]


@contextmanager
def unique_violation_as_taken(*columns: str) -> Iterator[None]:
    """Report a unique-constraint violation on ``columns`` as a taken value.

    Services check uniqueness before writing, but a concurrent request can
    claim the same value in between. The database constraint then rejects
    the write, which surfaces as a ``ValidationError`` instead of a driver
    error. Other integrity errors propagate unchanged.

    Args:
        columns: Unique columns of the table being written

    Raises:
        ValidationError: ``{column: ["is already taken"]}`` per violated column
    """
    try:
        yield
    except IntegrityError as e:
        taken = _violated_columns(e, columns)
        if not taken:
            raise
        logfire.warn("Unique constraint violated", columns=taken)
        raise ValidationError({column: ["is already taken"] for column in taken}) from e

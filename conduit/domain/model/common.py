"""Base models for domain entities."""

from enum import Enum
from typing import Self

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )

    def evolve(self, **changes) -> Self:
        """Return a new, re-validated instance with the given fields replaced.

        Unlike ``model_copy(update=...)`` the result goes through validation,
        so entity invariants hold for every instance.
        """
        return type(self)(**{**dict(self), **changes})


class FieldState(str, Enum):
    """How a field of a partial update was supplied."""

    UNSET = "unset"  # Not supplied at all
    BLANK = "blank"  # Supplied, but None or whitespace only
    VALUE = "value"  # Supplied with a usable value


class ChangeSet(BaseModel):
    """Base for partial-update inputs.

    Every field is optional. ``state()`` distinguishes a field that was never
    supplied from one that was supplied blank, so each entity can decide what
    "blank" means for each of its fields.
    """

    model_config = ConfigDict(frozen=True)

    def state(self, field: str) -> FieldState:
        """Classify how ``field`` was supplied."""
        if field not in self.model_fields_set:
            return FieldState.UNSET
        value = getattr(self, field)
        if value is None or (isinstance(value, str) and not value.strip()):
            return FieldState.BLANK
        return FieldState.VALUE

    def value_or(self, field: str, current):
        """Return the supplied value, or ``current`` if unset or blank."""
        if self.state(field) is FieldState.VALUE:
            return getattr(self, field)
        return current

    def is_empty(self) -> bool:
        """True if no field carries a usable value."""
        return all(
            self.state(name) is not FieldState.VALUE for name in type(self).model_fields
        )

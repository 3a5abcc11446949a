"""Domain layer errors."""

from collections.abc import Mapping, Sequence

from pydantic import ValidationError as PydanticValidationError


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """One or more named fields failed business rules.

    Errors are kept as a field name -> messages mapping so that several
    violations can be reported together.
    """

    def __init__(self, errors: Mapping[str, Sequence[str]]):
        self.errors: dict[str, list[str]] = {
            field: list(messages) for field, messages in errors.items()
        }
        summary = "; ".join(
            f"{field}: {', '.join(messages)}" for field, messages in self.errors.items()
        )
        super().__init__(f"Validation failed ({summary})")

    @classmethod
    def single(cls, field: str, message: str) -> "ValidationError":
        """Build an error carrying one message for one field."""
        return cls({field: [message]})

    @classmethod
    def from_pydantic(
        cls, exc: PydanticValidationError, field: str | None = None
    ) -> "ValidationError":
        """Translate a construction-time pydantic failure.

        Args:
            exc: Error raised while building an entity or value object
            field: Field name to report under when the error has no location
                (e.g. a value object validated on its own)

        Returns:
            ValidationError keyed by the offending field names
        """
        errors: dict[str, list[str]] = {}
        for error in exc.errors():
            loc = [str(part) for part in error.get("loc", ()) if part != "root"]
            name = loc[0] if loc else (field or "body")
            ctx_error = error.get("ctx", {}).get("error")
            message = str(ctx_error) if ctx_error is not None else error["msg"]
            errors.setdefault(name, []).append(message)
        return cls(errors)


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class BadRequestError(BusinessRuleViolationError):
    """Request is well-formed but semantically invalid (e.g. self-follow)."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ForbiddenError(DomainError):
    """Raised when an authenticated user mutates something they don't own."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UnauthorizedError(DomainError):
    """Raised when an operation needs an authenticated caller and has none."""

    def __init__(self, message: str = "Authentication required"):
        self.message = message
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        self.message = f"{resource} not found"
        super().__init__(f"{resource} not found: {identifier}")

"""Per-request security context."""

from typing import Optional

from conduit.domain.error import UnauthorizedError
from conduit.domain.value import UserId
from conduit.domain.value.common import ValueObject


class SecurityContext(ValueObject):
    """Identity of the caller for a single request.

    Built at the edge (from the request's credentials) and passed explicitly
    to every use case; never shared between requests.
    """

    current_user_id: Optional[UserId] = None

    @classmethod
    def anonymous(cls) -> "SecurityContext":
        return cls()

    @classmethod
    def for_user(cls, user_id: UserId) -> "SecurityContext":
        return cls(current_user_id=user_id)

    @property
    def is_authenticated(self) -> bool:
        return self.current_user_id is not None

    def require_user_id(self) -> UserId:
        """Return the caller's ID.

        Raises:
            UnauthorizedError: If the caller is anonymous
        """
        if self.current_user_id is None:
            raise UnauthorizedError("Authentication required")
        return self.current_user_id

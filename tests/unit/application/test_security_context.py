"""Unit tests for SecurityContext."""

from uuid import uuid4

import pytest

from conduit.application.security import SecurityContext
from conduit.domain.error import UnauthorizedError
from conduit.domain.value import UserId


class TestSecurityContext:
    """Tests for SecurityContext."""

    def test_anonymous(self):
        context = SecurityContext.anonymous()

        assert not context.is_authenticated
        assert context.current_user_id is None

    def test_anonymous_cannot_require_user(self):
        with pytest.raises(UnauthorizedError):
            SecurityContext.anonymous().require_user_id()

    def test_for_user(self):
        user_id = UserId(uuid4())

        context = SecurityContext.for_user(user_id)

        assert context.is_authenticated
        assert context.require_user_id() == user_id

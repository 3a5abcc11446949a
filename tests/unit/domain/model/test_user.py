"""Unit tests for the User aggregate and UserChanges."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from conduit.domain.model import FieldState, User, UserChanges
from conduit.domain.value import Email, UserId, Username


def make_user(**overrides) -> User:
    fields = {
        "id": UserId(uuid4()),
        "email": Email("jake@jake.jake"),
        "username": Username("jake"),
        "password_hash": "hash",
        "bio": "I work at statefarm",
        "image": "https://i.stack.imgur.com/xHWG8.jpg",
    }
    fields.update(overrides)
    return User(**fields)


class TestUserChanges:
    """Tests for ChangeSet field states."""

    def test_unset_field(self):
        changes = UserChanges()

        assert changes.state("bio") is FieldState.UNSET
        assert changes.is_empty()

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank_field(self, value):
        changes = UserChanges(bio=value)

        assert changes.state("bio") is FieldState.BLANK
        assert changes.is_empty()

    def test_value_field(self):
        changes = UserChanges(bio="New bio")

        assert changes.state("bio") is FieldState.VALUE
        assert not changes.is_empty()

    def test_value_or(self):
        changes = UserChanges(username="", bio="x")

        assert changes.value_or("username", "current") == "current"
        assert changes.value_or("email", "current") == "current"
        assert changes.value_or("bio", "current") == "x"


class TestUpdateProfile:
    """Tests for User.update_profile()."""

    def test_unset_fields_keep_values(self):
        user = make_user()

        updated = user.update_profile(UserChanges())

        assert updated.email == user.email
        assert updated.username == user.username
        assert updated.bio == user.bio
        assert updated.image == user.image

    def test_blank_email_and_username_keep_values(self):
        user = make_user()

        updated = user.update_profile(UserChanges(email="", username="  "))

        assert updated.email == user.email
        assert updated.username == user.username

    def test_blank_bio_and_image_clear(self):
        user = make_user()

        updated = user.update_profile(UserChanges(bio="", image=None))

        assert updated.bio is None
        assert updated.image is None

    def test_values_replace(self):
        user = make_user()

        updated = user.update_profile(
            UserChanges(email="NEW@jake.jake", username="jacob", bio="Hi")
        )

        assert updated.email == Email("new@jake.jake")
        assert updated.username == Username("jacob")
        assert updated.bio == "Hi"
        assert updated.id == user.id

    def test_returns_new_instance(self):
        """Users are immutable; updates produce a copy."""
        user = make_user()

        updated = user.update_profile(UserChanges(bio="Changed"))

        assert user.bio == "I work at statefarm"
        assert updated is not user
        assert updated.updated_at >= user.updated_at

    def test_invalid_username_is_rejected(self):
        user = make_user()

        with pytest.raises(ValidationError):
            user.update_profile(UserChanges(username="no spaces allowed"))


class TestUser:
    """Tests for User construction."""

    def test_password_hash_not_in_repr(self):
        user = make_user(password_hash="secret-hash")

        assert "secret-hash" not in repr(user)

    def test_is_frozen(self):
        user = make_user()

        with pytest.raises(ValidationError):
            user.bio = "changed"

    def test_update_password(self):
        user = make_user()

        updated = user.update_password("new-hash")

        assert updated.password_hash == "new-hash"
        assert user.password_hash == "hash"

"""Unit tests for user API types."""

import pytest

from meridian.helpers.dto import user_dto
from meridian.interfaces.api.types.user_types import NewUser, User, UserUpdate


class TestUserFromDto:
    """Tests for User.from_dto."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("admin", "expected"),
        [(0, False), (1, True), (2, True), (-1, True), (2**31 - 1, True)],
    )
    def test_admin_flag(self, admin: int, expected: bool) -> None:
        """Any non-zero numeric admin value is an admin."""
        user = User.from_dto(user_dto.User(name="walter", admin=admin))
        assert user.is_admin is expected

    @pytest.mark.unit
    def test_emits_canonical_bool(self) -> None:
        """The wire value is exactly true, not the stored magnitude."""
        user = User.from_dto(user_dto.User(name="walter", admin=7))
        assert user.model_dump() == {"name": "walter", "is_admin": True}


class TestNewUserToDto:
    """Tests for NewUser.to_dto."""

    @pytest.mark.unit
    def test_converts_fields(self) -> None:
        """Name, plaintext password and admin flag pass through unchanged."""
        dto = NewUser(name="alice", password="p", admin=True).to_dto()
        assert dto == user_dto.NewUser(name="alice", password="p", admin=True)

    @pytest.mark.unit
    def test_password_is_not_hashed(self) -> None:
        """Hashing belongs to the user manager."""
        dto = NewUser(name="bob", password="correct horse", admin=False).to_dto()
        assert dto.password == "correct horse"
        assert dto.admin is False


class TestUserUpdate:
    """Tests for UserUpdate patch semantics."""

    @pytest.mark.unit
    def test_empty_update_is_noop(self) -> None:
        """Both fields absent is a valid request with no changes."""
        update = UserUpdate()
        assert update.new_password is None
        assert update.new_is_admin is None
        assert update.has_changes() is False

    @pytest.mark.unit
    def test_single_field_is_a_change(self) -> None:
        """Either field alone counts as a change."""
        assert UserUpdate(new_password="x").has_changes() is True
        assert UserUpdate(new_is_admin=False).has_changes() is True

    @pytest.mark.unit
    def test_false_admin_is_not_absent(self) -> None:
        """Revoking admin (False) must be distinct from leaving it alone (None)."""
        update = UserUpdate.model_validate({"new_is_admin": False})
        assert update.new_is_admin is False
        assert update.new_password is None

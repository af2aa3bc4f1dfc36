"""
User API types.

Three shapes over one identity:
- User: read-only projection of a stored user
- NewUser: creation input
- UserUpdate: sparse patch consumed directly by the user-management collaborator
"""

from __future__ import annotations

from pydantic import BaseModel, StrictBool
from typing_extensions import Self

from meridian.helpers.dto import user_dto


class User(BaseModel):
    """Public view of a user account."""

    name: str
    is_admin: StrictBool

    @classmethod
    def from_dto(cls, user: user_dto.User) -> Self:
        """Project a stored user. Any non-zero admin value is an admin."""
        return cls(name=user.name, is_admin=user.admin != 0)


class NewUser(BaseModel):
    """Request body for creating a user."""

    name: str
    password: str
    admin: StrictBool

    def to_dto(self) -> user_dto.NewUser:
        """Convert to the internal creation request. No hashing happens here."""
        return user_dto.NewUser(name=self.name, password=self.password, admin=self.admin)


class UserUpdate(BaseModel):
    """Request body for updating a user. Absent fields are left unchanged."""

    new_password: str | None = None
    new_is_admin: StrictBool | None = None

    def has_changes(self) -> bool:
        """False for an empty patch, which callers treat as a valid no-op."""
        return self.new_password is not None or self.new_is_admin is not None

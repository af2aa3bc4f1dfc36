"""
Info API types.

Capability negotiation and first-run signals. These carry no DTO conversions:
the version pair is a process-wide constant and InitialSetup is computed by the
user-management collaborator.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, StrictBool
from typing_extensions import Self

# Bump MAJOR for breaking contract changes, MINOR for additive ones.
API_MAJOR_VERSION = 6
API_MINOR_VERSION = 1


class Version(BaseModel):
    """API version pair. Compared by equality only."""

    major: int = Field(..., ge=0, strict=True)
    minor: int = Field(..., ge=0, strict=True)

    @classmethod
    def current(cls) -> Self:
        """Return the version this server implements."""
        return cls(major=API_MAJOR_VERSION, minor=API_MINOR_VERSION)


class InitialSetup(BaseModel):
    """Whether any user account exists yet."""

    has_any_users: StrictBool

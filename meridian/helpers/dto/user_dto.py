"""
User domain DTOs.

Internal user shapes exchanged with the user-management collaborator.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class User:
    """Stored user record. admin is numeric: any non-zero value means admin."""

    name: str
    admin: int


@dataclass
class NewUser:
    """User creation request. The password is plaintext; hashing happens downstream."""

    name: str
    password: str
    admin: bool

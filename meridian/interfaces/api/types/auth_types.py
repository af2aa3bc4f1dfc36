"""
Auth API types.

Login inputs and the authenticated-session result. Token issuance and password
checks live in the auth collaborator; these types only carry the values.
"""

from __future__ import annotations

from pydantic import BaseModel, StrictBool


class Credentials(BaseModel):
    """Login request body. Transient, never persisted in this shape."""

    username: str
    password: str


class Authorization(BaseModel):
    """Login response: the session token and who it belongs to."""

    username: str
    token: str
    is_admin: StrictBool


class AuthQueryParameters(BaseModel):
    """Token passed as a query parameter (media URLs that cannot carry headers)."""

    auth_token: str

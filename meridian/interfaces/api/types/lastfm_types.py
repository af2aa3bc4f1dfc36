"""
Last.fm API types.

Payloads for the account-linking flow. Tokens are opaque here; the scrobble
collaborator issues and checks them.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class LastFMLink(BaseModel):
    """Callback payload completing a Last.fm link."""

    auth_token: str = Field(..., description="Server-issued auth token scoped to the link operation")
    token: str = Field(..., description="Last.fm session token used for scrobble calls")
    content: str = Field(..., description="Content relayed back to the client once linked")


class LastFMLinkToken(BaseModel):
    """Short-lived handle for continuing the link flow."""

    value: str

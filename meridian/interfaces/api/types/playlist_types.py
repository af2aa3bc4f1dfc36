"""
Playlist API types.

Playlist storage belongs to the playlist collaborator; these shapes only carry
names and track paths across the API.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel


class ListPlaylistsEntry(BaseModel):
    """One playlist in a listing."""

    name: str

    @classmethod
    def from_names(cls, names: Iterable[str]) -> list[ListPlaylistsEntry]:
        """Build listing entries, keeping the collaborator's order."""
        return [cls(name=name) for name in names]


class SavePlaylistInput(BaseModel):
    """Request body for saving a playlist. Track order is kept as given."""

    tracks: list[str]

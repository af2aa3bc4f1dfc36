"""
Index domain DTOs.

Records produced by the media indexer. Artist names are resolved separately
by the indexer and passed alongside these records when building API shapes.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Song:
    """Indexed song record."""

    path: str
    parent: str
    track_number: int | None = None
    disc_number: int | None = None
    title: str | None = None
    year: int | None = None
    album: str | None = None
    artwork: str | None = None
    duration: int | None = None  # Whole seconds
    lyricist: str | None = None
    composer: str | None = None
    genre: str | None = None
    label: str | None = None
    date_added: int = 0  # Unix timestamp (s)


@dataclass
class Directory:
    """Indexed directory record."""

    path: str
    parent: str | None = None
    year: int | None = None
    album: str | None = None
    artwork: str | None = None
    date_added: int = 0  # Unix timestamp (s)

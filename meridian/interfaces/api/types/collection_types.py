"""
Collection API types.

Shapes for browsing the indexed media collection.

Architecture:
- Song / Directory are assembled from index DTOs plus artist names that the
  indexer has already resolved, ordered and deduplicated
- CollectionFile is a closed union of exactly two variants, encoded with the
  variant name as the only key: {"Song": {...}} or {"Directory": {...}}
- The variant wrappers forbid extra keys, so a payload carrying neither or
  both tags fails to decode
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictInt, TypeAdapter
from typing_extensions import Self

from meridian.helpers.dto import index_dto


class Song(BaseModel):
    """An indexed song."""

    path: str
    parent: str
    track_number: StrictInt | None = None
    disc_number: StrictInt | None = None
    title: str | None = None
    artists: list[str]
    album_artists: list[str]
    year: StrictInt | None = None
    album: str | None = None
    artwork: str | None = None
    duration: StrictInt | None = Field(default=None, description="Duration in whole seconds")
    lyricist: str | None = None
    composer: str | None = None
    genre: str | None = None
    label: str | None = None

    @classmethod
    def from_dto(cls, song: index_dto.Song, artists: list[str], album_artists: list[str]) -> Self:
        """
        Assemble a Song from an index record and resolved artist names.

        Args:
            song: Index record
            artists: Track artist names, already in display order
            album_artists: Album artist names, already in display order

        Returns:
            API model; the name lists are copied unmodified
        """
        return cls(
            path=song.path,
            parent=song.parent,
            track_number=song.track_number,
            disc_number=song.disc_number,
            title=song.title,
            artists=list(artists),
            album_artists=list(album_artists),
            year=song.year,
            album=song.album,
            artwork=song.artwork,
            duration=song.duration,
            lyricist=song.lyricist,
            composer=song.composer,
            genre=song.genre,
            label=song.label,
        )


class Directory(BaseModel):
    """An indexed directory."""

    path: str
    artists: list[str]
    year: StrictInt | None = None
    album: str | None = None
    artwork: str | None = None
    date_added: StrictInt = Field(..., description="Unix timestamp (s)")

    @classmethod
    def from_dto(cls, directory: index_dto.Directory, artists: list[str]) -> Self:
        """Assemble a Directory from an index record and resolved artist names."""
        return cls(
            path=directory.path,
            artists=list(artists),
            year=directory.year,
            album=directory.album,
            artwork=directory.artwork,
            date_added=directory.date_added,
        )


# ──────────────────────────────────────────────────────────────────────
# CollectionFile union
# ──────────────────────────────────────────────────────────────────────

_VARIANT_CONFIG = ConfigDict(extra="forbid", serialize_by_alias=True)


class CollectionSong(BaseModel):
    """Song variant of CollectionFile."""

    model_config = _VARIANT_CONFIG

    song: Song = Field(alias="Song")

    @classmethod
    def from_dto(cls, song: index_dto.Song, artists: list[str], album_artists: list[str]) -> Self:
        return cls(Song=Song.from_dto(song, artists, album_artists))


class CollectionDirectory(BaseModel):
    """Directory variant of CollectionFile."""

    model_config = _VARIANT_CONFIG

    directory: Directory = Field(alias="Directory")

    @classmethod
    def from_dto(cls, directory: index_dto.Directory, artists: list[str]) -> Self:
        return cls(Directory=Directory.from_dto(directory, artists))


CollectionFile = CollectionSong | CollectionDirectory

COLLECTION_FILE_ADAPTER: TypeAdapter[CollectionFile] = TypeAdapter(CollectionFile)

"""
Config domain DTOs.

Internal shapes handed to and read back from the config store.

Rules:
- Import only stdlib and typing (no meridian.* imports outside helpers/dto)
- Pure data structures only (no I/O, no DB access, no business logic)

Partial updates:
- Every field of a patch type defaults to None, so an empty patch is a no-op
- None always means "no instruction", never "clear this value"
"""

from __future__ import annotations

from dataclasses import dataclass, field

from meridian.helpers.dto.ddns_dto import DDNSConfig
from meridian.helpers.dto.user_dto import NewUser
from meridian.helpers.dto.vfs_dto import MountDir


@dataclass
class Settings:
    """Current index settings as stored by the config store."""

    index_album_art_pattern: str
    index_sleep_duration_seconds: int


@dataclass
class NewSettings:
    """Sparse settings patch. Absent fields leave the stored value unchanged."""

    album_art_pattern: str | None = None
    reindex_every_n_seconds: int | None = None


@dataclass
class Config:
    """Top-level config patch.

    users and mount_dirs replace the whole stored collection when present.
    """

    settings: NewSettings | None = None
    users: list[NewUser] | None = None
    mount_dirs: list[MountDir] | None = None
    ydns: DDNSConfig | None = None


@dataclass
class ConfigSnapshot:
    """Fully-applied configuration held by the config store."""

    settings: Settings
    users: list[NewUser] = field(default_factory=list)
    mount_dirs: list[MountDir] = field(default_factory=list)
    ydns: DDNSConfig | None = None

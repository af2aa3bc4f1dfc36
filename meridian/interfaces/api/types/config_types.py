"""Config API types - Pydantic models for the Config domain.

External API contracts for configuration endpoints.
These models are thin adapters around DTOs from helpers/dto/config_dto.py,
helpers/dto/ddns_dto.py and helpers/dto/vfs_dto.py.

Architecture:
- Reads (Settings) always return complete values
- Writes (NewSettings, Config) are sparse patches; None means "leave unchanged"
- users / mount_dirs in a Config replace the whole collection when present
- Each direction is its own explicit method; renames are spelled out
"""

from __future__ import annotations

from pydantic import BaseModel, StrictInt
from typing_extensions import Self

from meridian.helpers.dto import config_dto, ddns_dto, vfs_dto
from meridian.interfaces.api.types.user_types import NewUser

# ──────────────────────────────────────────────────────────────────────
# Bidirectional Types
# ──────────────────────────────────────────────────────────────────────


class DDNSConfig(BaseModel):
    """Dynamic DNS credentials."""

    host: str
    username: str
    password: str

    @classmethod
    def from_dto(cls, config: ddns_dto.DDNSConfig) -> Self:
        """Report stored DDNS settings."""
        return cls(host=config.host, username=config.username, password=config.password)

    def to_dto(self) -> ddns_dto.DDNSConfig:
        """Convert to the DDNS client configuration."""
        return ddns_dto.DDNSConfig(host=self.host, username=self.username, password=self.password)


class MountDir(BaseModel):
    """A directory exposed in the virtual filesystem under a logical name."""

    source: str
    name: str

    @classmethod
    def from_dto(cls, mount_dir: vfs_dto.MountDir) -> Self:
        """Report a configured mount point."""
        return cls(source=mount_dir.source, name=mount_dir.name)

    def to_dto(self) -> vfs_dto.MountDir:
        """Convert to a VFS mount point. The source path is not checked here."""
        return vfs_dto.MountDir(source=self.source, name=self.name)


# ──────────────────────────────────────────────────────────────────────
# Response Models
# ──────────────────────────────────────────────────────────────────────


class Settings(BaseModel):
    """Current index settings."""

    album_art_pattern: str
    reindex_every_n_seconds: StrictInt

    @classmethod
    def from_dto(cls, settings: config_dto.Settings) -> Self:
        """
        Transform stored settings to the API shape.

        Args:
            settings: Settings from the config store

        Returns:
            API response model with wire field names
        """
        return cls(
            album_art_pattern=settings.index_album_art_pattern,
            reindex_every_n_seconds=settings.index_sleep_duration_seconds,
        )


# ──────────────────────────────────────────────────────────────────────
# Request Models
# ──────────────────────────────────────────────────────────────────────


class NewSettings(BaseModel):
    """Settings patch. Absent fields are left unchanged."""

    album_art_pattern: str | None = None
    reindex_every_n_seconds: StrictInt | None = None

    def to_dto(self) -> config_dto.NewSettings:
        """Convert to the internal settings patch, keeping absence intact."""
        return config_dto.NewSettings(
            album_art_pattern=self.album_art_pattern,
            reindex_every_n_seconds=self.reindex_every_n_seconds,
        )


class Config(BaseModel):
    """
    Configuration patch.

    Each section is optional; an absent section leaves that subsystem alone.
    users and mount_dirs are full replacements, not diffs.
    """

    settings: NewSettings | None = None
    users: list[NewUser] | None = None
    mount_dirs: list[MountDir] | None = None
    ydns: DDNSConfig | None = None

    def to_dto(self) -> config_dto.Config:
        """
        Convert to the internal config patch.

        Lists are converted element-wise in order, without deduplication.

        Returns:
            Config DTO with None for every absent section
        """
        return config_dto.Config(
            settings=self.settings.to_dto() if self.settings is not None else None,
            users=[u.to_dto() for u in self.users] if self.users is not None else None,
            mount_dirs=[m.to_dto() for m in self.mount_dirs] if self.mount_dirs is not None else None,
            ydns=self.ydns.to_dto() if self.ydns is not None else None,
        )

    @classmethod
    def from_snapshot(cls, snapshot: config_dto.ConfigSnapshot) -> Self:
        """
        Report the current configuration in patch shape.

        Sending the result back unchanged is a no-op. users is left out so
        passwords never leave the server; list them through User instead.
        ydns stays None when DDNS was never configured.

        Args:
            snapshot: Fully-applied configuration from the config store

        Returns:
            Config with settings, mount_dirs and ydns filled in
        """
        return cls(
            settings=NewSettings(
                album_art_pattern=snapshot.settings.index_album_art_pattern,
                reindex_every_n_seconds=snapshot.settings.index_sleep_duration_seconds,
            ),
            mount_dirs=[MountDir.from_dto(m) for m in snapshot.mount_dirs],
            ydns=DDNSConfig.from_dto(snapshot.ydns) if snapshot.ydns is not None else None,
        )

"""Config apply component.

Applies a decoded config patch onto the current configuration snapshot.

Rules:
- Absent (None) sections and fields leave the current value untouched
- Present settings fields overwrite; absent ones are kept
- Present users / mount_dirs replace the whole list, they are never merged
- Present ydns replaces the DDNS config
- Inputs are never mutated; a new snapshot is returned
"""

from __future__ import annotations

from dataclasses import replace

from meridian.helpers.dto.config_dto import Config, ConfigSnapshot, NewSettings, Settings


def apply_settings(current: Settings, patch: NewSettings) -> Settings:
    """Overlay a settings patch onto the current settings."""
    settings = replace(current)
    if patch.album_art_pattern is not None:
        settings.index_album_art_pattern = patch.album_art_pattern
    if patch.reindex_every_n_seconds is not None:
        settings.index_sleep_duration_seconds = patch.reindex_every_n_seconds
    return settings


def apply_config(current: ConfigSnapshot, patch: Config) -> ConfigSnapshot:
    """
    Apply a config patch and return the resulting snapshot.

    Args:
        current: Configuration currently in effect
        patch: Decoded patch from the API or the config file

    Returns:
        New ConfigSnapshot; current is left as it was

    """
    settings = current.settings
    if patch.settings is not None:
        settings = apply_settings(settings, patch.settings)

    users = patch.users if patch.users is not None else current.users
    mount_dirs = patch.mount_dirs if patch.mount_dirs is not None else current.mount_dirs
    ydns = patch.ydns if patch.ydns is not None else current.ydns

    return ConfigSnapshot(
        settings=replace(settings),
        users=[replace(u) for u in users],
        mount_dirs=[replace(m) for m in mount_dirs],
        ydns=replace(ydns) if ydns is not None else None,
    )

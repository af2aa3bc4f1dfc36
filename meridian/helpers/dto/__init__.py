"""
Domain DTOs (Data Transfer Objects) used behind the API boundary.

Domain-specific DTOs live in helpers/dto/<domain>_dto.py and are the shapes the
collaborators (config store, user manager, indexer, thumbnail renderer) work with.
The API layer converts its Pydantic contracts to and from these types.

Rules for DTO modules:
- Import only stdlib, typing and other helpers/dto modules
- Contain ONLY dataclass/type definitions
- No I/O, no DB access, no business logic
- Pure data structures, no Pydantic
"""

from __future__ import annotations

from meridian.helpers.dto.config_dto import Config, ConfigSnapshot, NewSettings, Settings
from meridian.helpers.dto.ddns_dto import DDNSConfig
from meridian.helpers.dto.index_dto import Directory, Song
from meridian.helpers.dto.thumbnail_dto import ThumbnailOptions
from meridian.helpers.dto.user_dto import NewUser, User
from meridian.helpers.dto.vfs_dto import MountDir

__all__ = [
    "Config",
    "ConfigSnapshot",
    "DDNSConfig",
    "Directory",
    "MountDir",
    "NewSettings",
    "NewUser",
    "Settings",
    "Song",
    "ThumbnailOptions",
    "User",
]

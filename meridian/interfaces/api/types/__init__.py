"""
API contract types package.

External API contracts organized by domain.
Each module defines Pydantic models with .from_dto() (outbound) and
.to_dto() (inbound) transformation methods.
"""

from meridian.interfaces.api.types.auth_types import (
    AuthQueryParameters,
    Authorization,
    Credentials,
)
from meridian.interfaces.api.types.collection_types import (
    COLLECTION_FILE_ADAPTER,
    CollectionDirectory,
    CollectionFile,
    CollectionSong,
    Directory,
    Song,
)
from meridian.interfaces.api.types.config_types import (
    Config,
    DDNSConfig,
    MountDir,
    NewSettings,
    Settings,
)
from meridian.interfaces.api.types.info_types import (
    API_MAJOR_VERSION,
    API_MINOR_VERSION,
    InitialSetup,
    Version,
)
from meridian.interfaces.api.types.lastfm_types import LastFMLink, LastFMLinkToken
from meridian.interfaces.api.types.playlist_types import ListPlaylistsEntry, SavePlaylistInput
from meridian.interfaces.api.types.thumbnail_types import (
    THUMBNAIL_MAX_DIMENSIONS,
    ThumbnailOptions,
    ThumbnailSize,
)
from meridian.interfaces.api.types.user_types import NewUser, User, UserUpdate

__all__ = [
    "API_MAJOR_VERSION",
    "API_MINOR_VERSION",
    "COLLECTION_FILE_ADAPTER",
    "THUMBNAIL_MAX_DIMENSIONS",
    "AuthQueryParameters",
    "Authorization",
    "CollectionDirectory",
    "CollectionFile",
    "CollectionSong",
    "Config",
    "Credentials",
    "DDNSConfig",
    "Directory",
    "InitialSetup",
    "LastFMLink",
    "LastFMLinkToken",
    "ListPlaylistsEntry",
    "MountDir",
    "NewSettings",
    "NewUser",
    "SavePlaylistInput",
    "Settings",
    "Song",
    "ThumbnailOptions",
    "ThumbnailSize",
    "User",
    "UserUpdate",
    "Version",
]

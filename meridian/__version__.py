"""Version information for Meridian."""

# Semantic versioning: MAJOR.MINOR.PATCH
# MAJOR: Breaking changes to API contracts or data structures
# MINOR: New features, backward compatible
# PATCH: Bug fixes, backward compatible
#
# The HTTP API carries its own (major, minor) pair, see
# meridian/interfaces/api/types/info_types.py.

__version__ = "0.2.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.2.0 - Config reporting and loader
#         - Config.from_snapshot() reports the current configuration in patch shape
#         - ConfigService loads the YAML config file through the Config contract
#         - Decode failures surface as HTTP 400 instead of 500
# 0.1.0 - Initial API contracts
#         - Users, settings, mount dirs, DDNS, thumbnails, collection, playlists, Last.fm

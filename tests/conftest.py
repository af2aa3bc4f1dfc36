"""
Pytest fixtures and configuration for the test suite.

Every conversion under test is pure, so fixtures build fresh DTOs per test.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path so tests can import meridian package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from meridian.helpers.dto import config_dto, ddns_dto, index_dto, user_dto, vfs_dto  # noqa: E402


# === DTO FIXTURES ===


@pytest.fixture
def index_song() -> index_dto.Song:
    """A fully-tagged index song record."""
    return index_dto.Song(
        path="Music/Khemmis/Hunted/01 - Above The Water.flac",
        parent="Music/Khemmis/Hunted",
        track_number=1,
        disc_number=1,
        title="Above The Water",
        year=2016,
        album="Hunted",
        artwork="Music/Khemmis/Hunted/Folder.jpg",
        duration=421,
        lyricist="Phil Pendergast",
        composer="Khemmis",
        genre="Doom Metal",
        label="20 Buck Spin",
        date_added=1_700_000_000,
    )


@pytest.fixture
def index_directory() -> index_dto.Directory:
    """An index directory record for an album folder."""
    return index_dto.Directory(
        path="Music/Khemmis/Hunted",
        parent="Music/Khemmis",
        year=2016,
        album="Hunted",
        artwork="Music/Khemmis/Hunted/Folder.jpg",
        date_added=1_700_000_000,
    )


@pytest.fixture
def config_snapshot() -> config_dto.ConfigSnapshot:
    """A configuration with settings, one user, three mount dirs and DDNS."""
    return config_dto.ConfigSnapshot(
        settings=config_dto.Settings(
            index_album_art_pattern="Folder.(jpeg|jpg|png)",
            index_sleep_duration_seconds=1800,
        ),
        users=[user_dto.NewUser(name="admin", password="hunter2", admin=True)],
        mount_dirs=[
            vfs_dto.MountDir(source="/srv/music", name="Music"),
            vfs_dto.MountDir(source="/srv/podcasts", name="Podcasts"),
            vfs_dto.MountDir(source="/mnt/nas/archive", name="Archive"),
        ],
        ydns=ddns_dto.DDNSConfig(host="home.ydns.eu", username="me", password="secret"),
    )


# === PYTEST MARKERS ===


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: fast isolated unit test")
    config.addinivalue_line("markers", "integration: exercises several layers together")

"""Virtual filesystem DTOs."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class MountDir:
    """A real directory exposed under a logical name in the virtual filesystem."""

    source: str
    name: str

"""DDNS domain DTOs."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class DDNSConfig:
    """Dynamic DNS credentials used by the update client."""

    host: str
    username: str
    password: str

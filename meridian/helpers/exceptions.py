"""Custom exceptions used across multiple layers.

Rules:
- Only put exceptions here if they need to be raised in one layer and caught in another.
- Keep exceptions simple and focused.
- No I/O, no config loading, no complex logic.
"""

from __future__ import annotations

from typing import Any


class PayloadDecodeError(Exception):
    """Raised when a wire payload does not match its API contract.

    This is always a client-input error. ``errors`` holds field-level
    details (``loc``, ``msg``, ``type``) without the offending input values.
    """

    def __init__(self, model_name: str, errors: list[dict[str, Any]]) -> None:
        self.model_name = model_name
        self.errors = errors
        super().__init__(f"Invalid {model_name} payload ({len(errors)} error(s))")


class ConfigFileError(Exception):
    """Raised when a config file exists but cannot be loaded."""

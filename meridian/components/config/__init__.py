"""
Config package.
"""

from .config_apply_comp import apply_config, apply_settings

__all__ = [
    "apply_config",
    "apply_settings",
]

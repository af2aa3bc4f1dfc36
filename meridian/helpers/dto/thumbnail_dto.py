"""
Thumbnail domain DTOs.

Options passed to the thumbnail renderer.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ThumbnailOptions:
    """Thumbnail rendering options.

    max_dimension of None means no bound (keep native size). It is never
    encoded as 0 or any other sentinel.
    """

    max_dimension: int | None = 400
    resize_if_almost_square: bool = True
    pad_to_square: bool = True

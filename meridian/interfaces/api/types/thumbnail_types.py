"""
Thumbnail API types.

Request options for thumbnail endpoints, decoded by overlaying the present
fields onto the renderer's default options.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, StrictBool

from meridian.helpers.dto import thumbnail_dto


class ThumbnailSize(str, Enum):
    """Requested thumbnail size. Wire tags are lowercase."""

    SMALL = "small"
    LARGE = "large"
    NATIVE = "native"

    @property
    def max_dimension(self) -> int | None:
        """Pixel bound for this size, or None for no bound."""
        return THUMBNAIL_MAX_DIMENSIONS[self]


# NATIVE must stay None: "no bound" is distinct from any finite size.
THUMBNAIL_MAX_DIMENSIONS: dict[ThumbnailSize, int | None] = {
    ThumbnailSize.SMALL: 400,
    ThumbnailSize.LARGE: 1200,
    ThumbnailSize.NATIVE: None,
}


class ThumbnailOptions(BaseModel):
    """Thumbnail request options. Absent fields keep the renderer defaults."""

    size: ThumbnailSize | None = None
    pad: StrictBool | None = None

    def to_dto(self) -> thumbnail_dto.ThumbnailOptions:
        """Overlay the present fields onto the default renderer options."""
        options = thumbnail_dto.ThumbnailOptions()
        if self.size is not None:
            options.max_dimension = self.size.max_dimension
        if self.pad is not None:
            options.pad_to_square = self.pad
        return options

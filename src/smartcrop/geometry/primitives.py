"""Geometry primitives for smartcrop.

Immutable Pydantic models for image sizes and rectangular regions in pixel
coordinates, where (0, 0) is the top-left corner of the image.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, Field


class Size(BaseModel, frozen=True):
    """A 2D size representing width and height.

    Both dimensions must be strictly positive (> 0).

    Attributes:
        width: Horizontal extent in pixels.
        height: Vertical extent in pixels.
    """

    width: int = Field(..., gt=0, description="Width in pixels")
    height: int = Field(..., gt=0, description="Height in pixels")

    @property
    def area(self) -> int:
        """Calculate the area in square pixels."""
        return self.width * self.height

    def to_tuple(self) -> tuple[int, int]:
        """Convert to (width, height) tuple."""
        return (self.width, self.height)

    @classmethod
    def from_tuple(cls, size: tuple[int, int]) -> Self:
        """Create Size from (width, height) tuple."""
        return cls(width=size[0], height=size[1])


class Region(BaseModel, frozen=True):
    """A rectangular crop window inside an image.

    The region is the half-open rectangle [x, x + width) x [y, y + height).
    Two regions with identical fields are interchangeable.

    Attributes:
        x: Left edge X coordinate (>= 0).
        y: Top edge Y coordinate (>= 0).
        width: Horizontal extent in pixels (> 0).
        height: Vertical extent in pixels (> 0).
    """

    x: int = Field(..., ge=0, description="Left edge X coordinate")
    y: int = Field(..., ge=0, description="Top edge Y coordinate")
    width: int = Field(..., gt=0, description="Width in pixels")
    height: int = Field(..., gt=0, description="Height in pixels")

    @property
    def area(self) -> int:
        """Calculate the area in square pixels."""
        return self.width * self.height

    @property
    def right(self) -> int:
        """Return the X coordinate of the right edge (exclusive)."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """Return the Y coordinate of the bottom edge (exclusive)."""
        return self.y + self.height

    @property
    def size(self) -> Size:
        """Return the dimensions as a Size."""
        return Size(width=self.width, height=self.height)

    def to_tuple(self) -> tuple[int, int, int, int]:
        """Convert to (x, y, width, height) tuple."""
        return (self.x, self.y, self.width, self.height)

    def to_box(self) -> tuple[int, int, int, int]:
        """Convert to a Pillow (left, upper, right, lower) crop box."""
        return (self.x, self.y, self.right, self.bottom)

    @classmethod
    def from_tuple(cls, bbox: tuple[int, int, int, int]) -> Self:
        """Create Region from (x, y, width, height) tuple."""
        return cls(x=bbox[0], y=bbox[1], width=bbox[2], height=bbox[3])

    @classmethod
    def at_origin(cls, size: Size) -> Self:
        """Create a region of the given size anchored at (0, 0)."""
        return cls(x=0, y=0, width=size.width, height=size.height)

"""Custom exceptions for smartcrop.

Every failure a caller can recover from is raised as a subclass of
SmartCropError so front ends can report it without catching unrelated
errors. Low-level Pillow errors are wrapped with path context.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from smartcrop.geometry.primitives import Region, Size


class SmartCropError(Exception):
    """Base exception for all smartcrop errors."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        """Initialize error with optional path context.

        Args:
            message: Human-readable error description.
            path: Path to the image file involved, if any.
        """
        self.path = Path(path) if path else None
        self.message = message
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with path context if available."""
        if self.path:
            return f"{self.message} (path: {self.path})"
        return self.message


class ImageDecodeError(SmartCropError):
    """Raised when input bytes are not a decodable image.

    This error is raised when:
    - The file does not exist or cannot be read
    - The content is not in a format Pillow recognizes
    - The image data is truncated or corrupted
    """


class ImageEncodeError(SmartCropError):
    """Raised when a cropped image cannot be encoded or written.

    This error is raised when:
    - The output extension maps to no known image format
    - The format cannot represent the image mode
    - The destination is not writable
    """


class InvalidSizeError(SmartCropError):
    """Raised when a size string is neither ``WxH`` nor ``square``."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            f"Invalid size {value!r}: expected WIDTHxHEIGHT (e.g. 800x600) "
            "or 'square'"
        )


class DegenerateTargetError(SmartCropError):
    """Raised when a target dimension is zero or negative."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        super().__init__(
            f"Target size must be positive in both dimensions, got {width}x{height}"
        )


class SizeTooLargeError(SmartCropError):
    """Raised when the target does not fit inside the source image.

    Attributes:
        target: Requested crop size.
        original: Size of the source image.
    """

    def __init__(self, target: Size, original: Size) -> None:
        self.target = target
        self.original = original
        super().__init__(
            f"Target size {target.width}x{target.height} exceeds image size "
            f"{original.width}x{original.height}"
        )


class ExtractionError(SmartCropError):
    """Raised when a selected region cannot be sliced from the image.

    Selection only yields regions inside the image, so this signals a
    broken invariant rather than bad input.
    """

    def __init__(self, message: str, *, region: Region, bounds: Size) -> None:
        self.region = region
        self.bounds = bounds
        super().__init__(
            f"{message} (region={region.to_tuple()}, bounds={bounds.to_tuple()})"
        )

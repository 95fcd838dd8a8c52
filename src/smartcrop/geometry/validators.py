"""Geometry validation utilities for smartcrop.

Bounds checks used before a region is sliced out of an image. Pillow pads
out-of-bounds crops silently, so every region is validated here first.
"""

from __future__ import annotations

from smartcrop.geometry.primitives import Region, Size


class ValidationError(Exception):
    """Raised when a region fails bounds validation.

    Attributes:
        region: The invalid region that was validated.
        bounds: The bounds it was validated against.
    """

    def __init__(
        self,
        message: str,
        *,
        region: Region,
        bounds: Size,
    ) -> None:
        self.region = region
        self.bounds = bounds
        self.message = message
        super().__init__(
            f"{message} (region={region.to_tuple()}, bounds={bounds.to_tuple()})"
        )


class GeometryValidator:
    """Stateless validator for regions and sizes against image bounds."""

    def fits(self, target: Size, bounds: Size) -> bool:
        """Return True if a window of ``target`` size fits inside ``bounds``."""
        return target.width <= bounds.width and target.height <= bounds.height

    def validate(
        self,
        region: Region,
        bounds: Size,
        *,
        strict: bool = True,
    ) -> bool:
        """Validate that a region lies fully inside bounds.

        Checks that region.right <= bounds.width and
        region.bottom <= bounds.height. Region x, y are already constrained
        to >= 0 by Pydantic.

        Args:
            region: The region to validate.
            bounds: Image dimensions.
            strict: If True, raise ValidationError on failure.
                If False, return False instead.

        Returns:
            True if the region is valid within bounds.

        Raises:
            ValidationError: If strict=True and region exceeds bounds.
        """
        is_valid = region.right <= bounds.width and region.bottom <= bounds.height

        if not is_valid and strict:
            violations: list[str] = []
            if region.right > bounds.width:
                violations.append(
                    f"right edge ({region.right}) exceeds width ({bounds.width})"
                )
            if region.bottom > bounds.height:
                violations.append(
                    f"bottom edge ({region.bottom}) exceeds height ({bounds.height})"
                )
            raise ValidationError(
                f"Region out of bounds: {'; '.join(violations)}",
                region=region,
                bounds=bounds,
            )

        return is_valid

"""Content-aware cropping pipeline for smartcrop.

Orchestrates the region search and the extraction of the winning window
from a decoded Pillow image.

Pipeline:
    1. Reject degenerate targets (zero or negative width/height).
    2. Convert the image to an (H, W, 3) pixel buffer.
    3. Select the highest-entropy window with RegionSelector.
    4. Turn a NoFit selection into SizeTooLargeError.
    5. Validate the region against the image bounds and crop it.

Boundary Behavior:
    Pillow's Image.crop pads out-of-bounds boxes with black instead of
    failing, so the region is validated explicitly before cropping. A
    target larger than the image is reported as SizeTooLargeError and never
    reaches extraction.
"""

from __future__ import annotations

from dataclasses import dataclass

from PIL import Image

from smartcrop.core.selector import NoFit, RegionSelector, Selected
from smartcrop.exceptions import (
    DegenerateTargetError,
    ExtractionError,
    SizeTooLargeError,
)
from smartcrop.geometry import GeometryValidator, Region, Size, ValidationError
from smartcrop.imaging import to_pixel_buffer
from smartcrop.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CroppedImage:
    """Result of a content-aware crop.

    Attributes:
        image: The cropped Pillow image, exactly region.width x region.height.
        region: Window of the source image that was kept.
        score: Entropy of the kept window in bits (0.0 if the default
            region at the origin was kept).
        source_size: Dimensions of the source image.
    """

    image: Image.Image
    region: Region
    score: float
    source_size: Size


class CropEngine:
    """Crops images to their most interesting window.

    Example:
        >>> from smartcrop.imaging import load_image
        >>>
        >>> engine = CropEngine()
        >>> result = engine.crop(load_image("photo.png"), 800, 600)
        >>> result.image.size
        (800, 600)
        >>> thumb = engine.square(load_image("photo.png"))
    """

    __slots__ = ("_selector", "_validator")

    def __init__(self, selector: RegionSelector | None = None) -> None:
        """Initialize the crop engine.

        Args:
            selector: Region selector. Defaults to an entropy-scoring
                RegionSelector with sequential scoring.
        """
        self._selector = selector or RegionSelector()
        self._validator = GeometryValidator()

    def crop(self, image: Image.Image, width: int, height: int) -> CroppedImage:
        """Crop ``image`` to its most interesting ``width`` x ``height`` window.

        Args:
            image: Source image, any Pillow mode.
            width: Target width in pixels.
            height: Target height in pixels.

        Returns:
            CroppedImage with the extracted window and its metadata.

        Raises:
            DegenerateTargetError: If width or height is not positive.
            SizeTooLargeError: If the target exceeds the image on either axis.
            ExtractionError: If the selected region falls outside the image.
        """
        selection = self.locate(image, width, height)
        region = selection.region
        source_size = Size.from_tuple(image.size)

        try:
            self._validator.validate(region, source_size)
        except ValidationError as e:
            raise ExtractionError(
                "Selected region cannot be extracted",
                region=region,
                bounds=source_size,
            ) from e

        cropped = image.crop(region.to_box())
        logger.info("Image cropped", region=region.to_tuple(), score=selection.score)
        return CroppedImage(
            image=cropped,
            region=region,
            score=selection.score,
            source_size=source_size,
        )

    def square(self, image: Image.Image) -> CroppedImage:
        """Crop ``image`` to its most interesting square of side min(W, H)."""
        size = min(image.size)
        return self.crop(image, size, size)

    def locate(self, image: Image.Image, width: int, height: int) -> Selected:
        """Select the window ``crop`` would keep, without extracting it.

        Raises:
            DegenerateTargetError: If width or height is not positive.
            SizeTooLargeError: If the target exceeds the image on either axis.
        """
        if width <= 0 or height <= 0:
            raise DegenerateTargetError(width, height)

        target = Size(width=width, height=height)
        result = self._selector.select(to_pixel_buffer(image), target)
        if isinstance(result, NoFit):
            raise SizeTooLargeError(result.target, result.original)
        return result

"""smartcrop: content-aware image cropping.

Selects the most "interesting" fixed-size window of an image, using the
Shannon entropy of its pooled RGB intensity histogram as a proxy for visual
complexity, and crops the image to it.

Example:
    from smartcrop import CropEngine, load_image

    engine = CropEngine()
    result = engine.crop(load_image("photo.jpg"), 800, 600)
    result.image.save("thumb.jpg")
"""

from smartcrop.core import CropEngine, CroppedImage, NoFit, RegionSelector, Selected
from smartcrop.exceptions import (
    DegenerateTargetError,
    ExtractionError,
    ImageDecodeError,
    ImageEncodeError,
    InvalidSizeError,
    SizeTooLargeError,
    SmartCropError,
)
from smartcrop.geometry import Region, Size
from smartcrop.imaging import load_image, save_image

__version__ = "0.1.0"

__all__ = [
    "CropEngine",
    "CroppedImage",
    "DegenerateTargetError",
    "ExtractionError",
    "ImageDecodeError",
    "ImageEncodeError",
    "InvalidSizeError",
    "NoFit",
    "Region",
    "RegionSelector",
    "Selected",
    "Size",
    "SizeTooLargeError",
    "SmartCropError",
    "__version__",
    "load_image",
    "save_image",
]

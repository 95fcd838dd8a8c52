"""Image decoding and encoding via Pillow.

Wraps Pillow's open/save with smartcrop's error types and converts decoded
images into the (H, W, 3) uint8 pixel buffers the region search consumes.
"""

from __future__ import annotations

from io import BytesIO
from pathlib import Path

import numpy as np
import numpy.typing as npt
from PIL import Image, UnidentifiedImageError

from smartcrop.exceptions import ImageDecodeError, ImageEncodeError

# Formats without an alpha channel; RGBA/LA/P input is flattened to RGB
_OPAQUE_FORMATS: frozenset[str] = frozenset({"JPEG", "BMP", "PPM"})
_LOSSY_FORMATS: frozenset[str] = frozenset({"JPEG", "WEBP"})


def load_image(path: str | Path) -> Image.Image:
    """Open and fully decode an image file.

    Args:
        path: Path to the image.

    Returns:
        The decoded Pillow image.

    Raises:
        ImageDecodeError: If the file is missing, unreadable, or not an image.
    """
    path = Path(path)
    if not path.is_file():
        raise ImageDecodeError("File not found", path=path)

    try:
        with Image.open(path) as img:
            img.load()
            return img.copy()
    except UnidentifiedImageError as e:
        raise ImageDecodeError("Unsupported image format", path=path) from e
    except OSError as e:
        raise ImageDecodeError(f"Failed to decode image: {e}", path=path) from e


def decode_image(data: bytes) -> Image.Image:
    """Decode an in-memory image.

    Raises:
        ImageDecodeError: If the bytes are not a decodable image.
    """
    try:
        with Image.open(BytesIO(data)) as img:
            img.load()
            return img.copy()
    except UnidentifiedImageError as e:
        raise ImageDecodeError("Unsupported image format") from e
    except OSError as e:
        raise ImageDecodeError(f"Failed to decode image: {e}") from e


def to_pixel_buffer(image: Image.Image) -> npt.NDArray[np.uint8]:
    """Convert an image to an (H, W, 3) uint8 RGB array.

    Any mode is converted to RGB first, so grayscale images yield three
    identical channels and alpha is dropped.
    """
    rgb = image if image.mode == "RGB" else image.convert("RGB")
    return np.asarray(rgb, dtype=np.uint8)


def encode_image(
    image: Image.Image,
    image_format: str,
    *,
    quality: int = 90,
) -> bytes:
    """Encode an image to bytes in the given Pillow format (e.g. "PNG").

    Raises:
        ImageEncodeError: If Pillow cannot write the image in that format.
    """
    buffer = BytesIO()
    try:
        _prepare(image, image_format).save(
            buffer, format=image_format, **_save_options(image_format, quality)
        )
    except (KeyError, OSError, ValueError) as e:
        raise ImageEncodeError(f"Failed to encode image as {image_format}: {e}") from e
    return buffer.getvalue()


def save_image(
    image: Image.Image,
    path: str | Path,
    *,
    quality: int = 90,
) -> Path:
    """Write an image, inferring the format from the file extension.

    Args:
        image: Image to write.
        path: Destination path.
        quality: Encoder quality for lossy formats (1-100).

    Returns:
        The path written to.

    Raises:
        ImageEncodeError: If the extension is unknown or the write fails.
    """
    path = Path(path)
    image_format = Image.registered_extensions().get(path.suffix.lower())
    if image_format is None:
        raise ImageEncodeError(
            f"Cannot infer image format from extension '{path.suffix}'", path=path
        )

    try:
        _prepare(image, image_format).save(
            path, format=image_format, **_save_options(image_format, quality)
        )
    except (KeyError, OSError, ValueError) as e:
        raise ImageEncodeError(f"Failed to save image: {e}", path=path) from e
    return path


def _prepare(image: Image.Image, image_format: str) -> Image.Image:
    if image_format.upper() in _OPAQUE_FORMATS and image.mode not in ("RGB", "L"):
        return image.convert("RGB")
    return image


def _save_options(image_format: str, quality: int) -> dict[str, int]:
    if image_format.upper() in _LOSSY_FORMATS:
        return {"quality": quality}
    return {}

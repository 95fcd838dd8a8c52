"""Image I/O for smartcrop.

Pillow-backed decoding, encoding and conversion to the numpy pixel
buffers used by the region search.

Example:
    from smartcrop.imaging import load_image, save_image, to_pixel_buffer

    image = load_image("photo.png")
    pixels = to_pixel_buffer(image)  # (H, W, 3) uint8
"""

from smartcrop.imaging.codec import (
    decode_image,
    encode_image,
    load_image,
    save_image,
    to_pixel_buffer,
)

__all__ = [
    "decode_image",
    "encode_image",
    "load_image",
    "save_image",
    "to_pixel_buffer",
]

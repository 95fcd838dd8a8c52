"""Shared pytest fixtures and configuration."""

from collections.abc import Callable, Iterator
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from smartcrop.config import Settings
from smartcrop.utils.logging import clear_crop_context, configure_logging

# Noise patch placement for the "busy square on a flat background" fixture
PATCH_ORIGIN = (100, 100)
PATCH_SIZE = 100


def make_patch_image(
    size: tuple[int, int] = (300, 300),
    origin: tuple[int, int] = PATCH_ORIGIN,
    patch: int = PATCH_SIZE,
    seed: int = 7,
) -> Image.Image:
    """Black RGB image with a square of random noise at ``origin``."""
    width, height = size
    pixels = np.zeros((height, width, 3), dtype=np.uint8)
    rng = np.random.default_rng(seed)
    x, y = origin
    pixels[y : y + patch, x : x + patch] = rng.integers(
        0, 256, size=(patch, patch, 3), dtype=np.uint8
    )
    return Image.fromarray(pixels)


@pytest.fixture(autouse=True)
def reset_crop_context() -> Iterator[None]:
    """Reset log context between tests."""
    clear_crop_context()
    yield
    clear_crop_context()


@pytest.fixture
def test_settings() -> Settings:
    """Create a Settings instance with test-safe defaults."""
    return Settings(
        LOG_LEVEL="DEBUG",
        LOG_FORMAT="console",
        _env_file=None,  # type: ignore[call-arg]
    )


@pytest.fixture
def configure_test_logging() -> Iterator[None]:
    """Configure logging for tests with console output."""
    configure_logging(level="DEBUG", log_format="console")
    yield


@pytest.fixture
def patch_image_factory() -> Callable[..., Image.Image]:
    """Build noise-patch images with custom size, origin or seed."""
    return make_patch_image


@pytest.fixture
def patch_image() -> Image.Image:
    """300x300 black image with a 100x100 noise square at (100, 100)."""
    return make_patch_image()


@pytest.fixture
def patch_png(tmp_path: Path, patch_image: Image.Image) -> Path:
    """``patch_image`` written to a PNG file."""
    path = tmp_path / "patch.png"
    patch_image.save(path)
    return path


@pytest.fixture
def text_file(tmp_path: Path) -> Path:
    """A file that exists but is not an image."""
    path = tmp_path / "notes.txt"
    path.write_text("definitely not pixels\n")
    return path

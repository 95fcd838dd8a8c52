"""Unit tests for the CropEngine content-aware cropping pipeline.

Tests CropEngine including:
- Crop output dimensions and pixel content
- Square mode sizing from min(W, H)
- Typed errors for degenerate and oversized targets
- Extraction guard against out-of-bounds selections
- Dependency injection of the selector
"""

from __future__ import annotations

from collections.abc import Callable
from unittest.mock import MagicMock

import numpy as np
import pytest
from PIL import Image

from smartcrop.core.crop_engine import CropEngine, CroppedImage
from smartcrop.core.selector import NoFit, RegionSelector, Selected
from smartcrop.exceptions import (
    DegenerateTargetError,
    ExtractionError,
    SizeTooLargeError,
)
from smartcrop.geometry import Region, Size


@pytest.fixture
def engine() -> CropEngine:
    return CropEngine()


class TestCroppedImage:
    """Tests for CroppedImage dataclass."""

    def test_cropped_image_immutability(self) -> None:
        cropped = CroppedImage(
            image=Image.new("RGB", (10, 10)),
            region=Region(x=0, y=0, width=10, height=10),
            score=0.0,
            source_size=Size(width=10, height=10),
        )
        with pytest.raises(AttributeError):
            cropped.score = 1.0  # type: ignore[misc]


class TestCropEngineInit:
    """Tests for CropEngine initialization."""

    def test_default_selector(self) -> None:
        assert isinstance(CropEngine()._selector, RegionSelector)

    def test_injected_selector(self) -> None:
        selector = MagicMock()
        assert CropEngine(selector)._selector is selector


class TestCrop:
    """Tests for CropEngine.crop."""

    def test_crop_returns_requested_dimensions(
        self, engine: CropEngine, patch_image: Image.Image
    ) -> None:
        result = engine.crop(patch_image, 100, 100)
        assert result.image.size == (100, 100)
        assert result.source_size == Size(width=300, height=300)

    def test_crop_keeps_noise_patch(
        self, engine: CropEngine, patch_image: Image.Image
    ) -> None:
        result = engine.crop(patch_image, 100, 100)

        assert result.region == Region(x=100, y=100, width=100, height=100)
        expected = np.asarray(patch_image)[100:200, 100:200]
        np.testing.assert_array_equal(np.asarray(result.image), expected)
        assert result.score > 7.0

    def test_crop_exact_size_returns_whole_image(self, engine: CropEngine) -> None:
        image = Image.new("RGB", (120, 80), color=(10, 200, 30))

        result = engine.crop(image, 120, 80)

        assert result.region == Region(x=0, y=0, width=120, height=80)
        assert result.image.size == image.size

    def test_crop_non_square_target(
        self, engine: CropEngine, patch_image: Image.Image
    ) -> None:
        result = engine.crop(patch_image, 150, 60)
        assert result.image.size == (150, 60)
        assert result.region.size == Size(width=150, height=60)

    @pytest.mark.parametrize("mode", ["L", "RGBA", "P"])
    def test_crop_accepts_other_modes(
        self, engine: CropEngine, patch_image: Image.Image, mode: str
    ) -> None:
        result = engine.crop(patch_image.convert(mode), 100, 100)
        assert result.image.mode == mode
        assert result.image.size == (100, 100)

    @pytest.mark.parametrize(("width", "height"), [(0, 100), (100, 0), (-5, 10)])
    def test_degenerate_target_rejected_before_selection(
        self, width: int, height: int
    ) -> None:
        selector = MagicMock()
        engine = CropEngine(selector)

        with pytest.raises(DegenerateTargetError) as exc_info:
            engine.crop(Image.new("RGB", (50, 50)), width, height)

        assert exc_info.value.width == width
        assert exc_info.value.height == height
        selector.select.assert_not_called()

    @pytest.mark.parametrize(("width", "height"), [(100, 200), (200, 100)])
    def test_target_larger_than_image_raises(
        self, engine: CropEngine, width: int, height: int
    ) -> None:
        image = Image.new("RGB", (100, 100))

        with pytest.raises(SizeTooLargeError, match="exceeds image size") as exc_info:
            engine.crop(image, width, height)

        assert exc_info.value.target == Size(width=width, height=height)
        assert exc_info.value.original == Size(width=100, height=100)

    def test_no_fit_from_selector_raises_size_too_large(self) -> None:
        selector = MagicMock()
        selector.select.return_value = NoFit(
            original=Size(width=10, height=10), target=Size(width=20, height=20)
        )

        with pytest.raises(SizeTooLargeError):
            CropEngine(selector).crop(Image.new("RGB", (10, 10)), 20, 20)

    def test_out_of_bounds_selection_raises_extraction_error(self) -> None:
        bad_region = Region(x=150, y=150, width=100, height=100)
        selector = MagicMock()
        selector.select.return_value = Selected(
            region=bad_region, score=1.0, candidates=1
        )

        with pytest.raises(ExtractionError) as exc_info:
            CropEngine(selector).crop(Image.new("RGB", (200, 200)), 100, 100)

        assert exc_info.value.region == bad_region
        assert exc_info.value.bounds == Size(width=200, height=200)


class TestSquare:
    """Tests for CropEngine.square."""

    def test_landscape_uses_height(self, engine: CropEngine) -> None:
        image = Image.new("RGB", (300, 200), color=(50, 50, 50))

        result = engine.square(image)

        assert result.image.size == (200, 200)
        assert result.region == Region(x=0, y=0, width=200, height=200)

    def test_portrait_uses_width(
        self, engine: CropEngine, patch_image_factory: Callable[..., Image.Image]
    ) -> None:
        image = patch_image_factory(size=(120, 400), origin=(10, 250), patch=100)
        result = engine.square(image)
        assert result.image.size == (120, 120)

    def test_square_image_is_returned_whole(
        self, engine: CropEngine, patch_image: Image.Image
    ) -> None:
        result = engine.square(patch_image)
        assert result.region == Region(x=0, y=0, width=300, height=300)


class TestLocate:
    """Tests for CropEngine.locate."""

    def test_locate_returns_selection_without_cropping(
        self, engine: CropEngine, patch_image: Image.Image
    ) -> None:
        selection = engine.locate(patch_image, 100, 100)
        assert selection.region == Region(x=100, y=100, width=100, height=100)
        assert selection.candidates == 16

    def test_locate_uses_rgb_pixel_buffer(self) -> None:
        selector = MagicMock()
        selector.select.return_value = Selected(
            region=Region(x=0, y=0, width=4, height=4), score=0.0, candidates=1
        )

        CropEngine(selector).locate(Image.new("LA", (4, 4)), 4, 4)

        pixels, target = selector.select.call_args.args
        assert pixels.shape == (4, 4, 3)
        assert pixels.dtype == np.uint8
        assert target == Size(width=4, height=4)

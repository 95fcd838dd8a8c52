"""CLI runners for cropping and region inspection.

This module provides the execution logic for the CLI commands, bridging
the CLI interface to the imaging and core components.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

from PIL import Image

from smartcrop.core import CropEngine, RegionSelector
from smartcrop.exceptions import InvalidSizeError
from smartcrop.geometry import Region, Size
from smartcrop.imaging import load_image, save_image
from smartcrop.utils.logging import bind_crop_context, clear_crop_context, get_logger

SQUARE = "square"
_SIZE_PATTERN = re.compile(r"^\s*(\d+)\s*[xX]\s*(\d+)\s*$")

TargetSize = tuple[int, int] | Literal["square"]


@dataclass(frozen=True)
class CropRunResult:
    """Result from a single crop or region lookup."""

    input_path: Path
    region: Region
    source_size: Size
    score: float
    output_path: Path | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "input": str(self.input_path),
            "source_size": list(self.source_size.to_tuple()),
            "region": self.region.model_dump(),
            "score": self.score,
        }
        if self.output_path is not None:
            data["output"] = str(self.output_path)
        return data


def parse_size(value: str) -> TargetSize:
    """Parse a ``--size`` value.

    Args:
        value: ``WIDTHxHEIGHT`` (e.g. "800x600") or "square".

    Returns:
        (width, height) tuple, or "square".

    Raises:
        InvalidSizeError: If the value matches neither form.
    """
    if value.strip().lower() == SQUARE:
        return SQUARE
    match = _SIZE_PATTERN.match(value)
    if match is None:
        raise InvalidSizeError(value)
    return int(match.group(1)), int(match.group(2))


def _target_for(image: Image.Image, size: TargetSize) -> tuple[int, int]:
    if size == SQUARE:
        side = min(image.size)
        return side, side
    return size


def run_crop(
    *,
    input_path: Path,
    output_path: Path,
    size: str,
    quality: int,
    workers: int = 1,
) -> CropRunResult:
    """Crop an image file to its most interesting window and save it.

    Raises:
        SmartCropError: Any parse, decode, selection or encode failure.
    """
    logger = get_logger(__name__)
    target = parse_size(size)
    bind_crop_context(source=str(input_path), target=size)
    try:
        image = load_image(input_path)
        engine = CropEngine(RegionSelector(max_workers=workers))
        result = engine.crop(image, *_target_for(image, target))
        written = save_image(result.image, output_path, quality=quality)
        logger.info("Cropped image saved", path=str(written))
    finally:
        clear_crop_context()

    return CropRunResult(
        input_path=input_path,
        region=result.region,
        source_size=result.source_size,
        score=result.score,
        output_path=written,
    )


def run_find_region(
    *,
    input_path: Path,
    size: str,
    workers: int = 1,
) -> CropRunResult:
    """Locate the window ``run_crop`` would keep without writing anything.

    Raises:
        SmartCropError: Any parse, decode or selection failure.
    """
    target = parse_size(size)
    bind_crop_context(source=str(input_path), target=size)
    try:
        image = load_image(input_path)
        engine = CropEngine(RegionSelector(max_workers=workers))
        selection = engine.locate(image, *_target_for(image, target))
    finally:
        clear_crop_context()

    return CropRunResult(
        input_path=input_path,
        region=selection.region,
        source_size=Size.from_tuple(image.size),
        score=selection.score,
    )

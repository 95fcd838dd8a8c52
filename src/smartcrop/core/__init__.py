"""Core algorithms for smartcrop.

Public API:
    - enumerate_regions: Half-overlapping candidate windows in scan order.
    - EntropyScorer / region_entropy: Pooled-channel Shannon entropy.
    - RegionSelector: Picks the highest-scoring candidate.
    - Selected / NoFit: Two-state selection result.
    - CropEngine: Selection plus extraction from a Pillow image.
    - CroppedImage: Result container with image and metadata.
"""

from smartcrop.core.crop_engine import CropEngine, CroppedImage
from smartcrop.core.entropy import (
    EntropyScorer,
    intensity_histogram,
    region_entropy,
    shannon_entropy,
)
from smartcrop.core.enumerator import axis_offsets, enumerate_regions
from smartcrop.core.selector import (
    NoFit,
    RegionScorerProtocol,
    RegionSelector,
    Selected,
    SelectionResult,
    best_region,
)

__all__ = [
    "CropEngine",
    "CroppedImage",
    "EntropyScorer",
    "NoFit",
    "RegionScorerProtocol",
    "RegionSelector",
    "Selected",
    "SelectionResult",
    "axis_offsets",
    "best_region",
    "enumerate_regions",
    "intensity_histogram",
    "region_entropy",
    "shannon_entropy",
]

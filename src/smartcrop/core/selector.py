"""Best-region selection.

Drives the enumerator, scores every candidate and keeps the highest
scoring one. Scores are compared with strict ``>`` against a 0.0 baseline
in enumeration order, so the first of several equal maxima wins and an
image with zero entropy everywhere keeps the default region at the origin.

The result is a two-state value: ``Selected`` with a region guaranteed to
lie inside the image, or ``NoFit`` when the target is larger than the image
on either axis.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Protocol

import numpy as np
import numpy.typing as npt

from smartcrop.core.entropy import EntropyScorer
from smartcrop.core.enumerator import enumerate_regions
from smartcrop.geometry import GeometryValidator, Region, Size
from smartcrop.utils.logging import get_logger

logger = get_logger(__name__)


class RegionScorerProtocol(Protocol):
    """Interface for region scorers, allowing alternate or fake scorers."""

    def score(self, pixels: npt.NDArray[np.uint8], region: Region) -> float:
        """Return a non-negative interest score for ``region``."""
        ...


@dataclass(frozen=True)
class Selected:
    """A region was chosen.

    Attributes:
        region: Winning region, inside the image bounds.
        score: Score of the winning region (0.0 if the default was kept).
        candidates: Number of candidate windows that were scored.
    """

    region: Region
    score: float
    candidates: int


@dataclass(frozen=True)
class NoFit:
    """The target window does not fit inside the image."""

    original: Size
    target: Size


SelectionResult = Selected | NoFit


def buffer_size(pixels: npt.NDArray[np.uint8]) -> Size:
    """Return the (width, height) of an (H, W, C) pixel buffer."""
    height, width = pixels.shape[:2]
    return Size(width=width, height=height)


class RegionSelector:
    """Selects the most interesting region of a pixel buffer.

    Example:
        >>> selector = RegionSelector()
        >>> result = selector.select(pixels, Size(width=100, height=100))
        >>> if isinstance(result, Selected):
        ...     print(result.region)
    """

    __slots__ = ("_max_workers", "_scorer", "_validator")

    def __init__(
        self,
        scorer: RegionScorerProtocol | None = None,
        max_workers: int = 1,
    ) -> None:
        """Initialize the selector.

        Args:
            scorer: Region scorer. Defaults to EntropyScorer.
            max_workers: Threads used to score candidates. Values <= 1 score
                sequentially. Results are identical either way. The thread
                pool lives for a single select call and is shut down before
                it returns, so a selector holds no threads between calls.
        """
        self._scorer = scorer or EntropyScorer()
        self._max_workers = max_workers
        self._validator = GeometryValidator()

    def select(
        self,
        pixels: npt.NDArray[np.uint8],
        target: Size,
    ) -> SelectionResult:
        """Find the highest-scoring window of ``target`` size.

        Args:
            pixels: Pixel buffer of shape (H, W, C) with C >= 3.
            target: Window dimensions.

        Returns:
            Selected with the best region, or NoFit if the target is larger
            than the buffer on either axis.
        """
        original = buffer_size(pixels)
        if not self._validator.fits(target, original):
            logger.debug(
                "Target does not fit",
                original=original.to_tuple(),
                target=target.to_tuple(),
            )
            return NoFit(original=original, target=target)

        candidates = enumerate_regions(original, target)
        scores = self._score_all(pixels, candidates)
        region, score = best_region(
            zip(candidates, scores, strict=True),
            default=Region.at_origin(target),
        )

        logger.debug(
            "Region selected",
            region=region.to_tuple(),
            score=score,
            candidates=len(candidates),
        )
        return Selected(region=region, score=score, candidates=len(candidates))

    def _score_all(
        self,
        pixels: npt.NDArray[np.uint8],
        candidates: list[Region],
    ) -> Iterator[float]:
        if self._max_workers <= 1 or len(candidates) <= 1:
            return (self._scorer.score(pixels, region) for region in candidates)

        def score(region: Region) -> float:
            return self._scorer.score(pixels, region)

        # Executor.map yields in submission order, keeping the reduction stable
        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            scores = list(executor.map(score, candidates))
        return iter(scores)


def best_region(
    scored: Iterable[tuple[Region, float]],
    default: Region,
) -> tuple[Region, float]:
    """Reduce scored candidates to the first strict maximum above 0.0.

    Args:
        scored: (region, score) pairs in enumeration order.
        default: Region returned when no score exceeds 0.0.

    Returns:
        (region, score) of the winner, or (default, 0.0).
    """
    best, best_score = default, 0.0
    for region, score in scored:
        if score > best_score:
            best, best_score = region, score
    return best, best_score

"""Shannon entropy scoring of image regions.

A region's "interest" is the entropy, in bits, of a single 256-bucket
intensity histogram into which the R, G and B values of every pixel are
pooled. Each pixel therefore contributes three counts. Flat areas score
near 0; busy, textured areas approach the maximum of 8 bits.
"""

from __future__ import annotations

from typing import Any

import numpy as np
import numpy.typing as npt

from smartcrop.geometry import Region

HISTOGRAM_BINS = 256
SCORED_CHANNELS = 3


def intensity_histogram(
    pixels: npt.NDArray[np.uint8],
    region: Region,
) -> npt.NDArray[np.int64]:
    """Build the pooled channel histogram of a region.

    Args:
        pixels: Pixel buffer of shape (H, W, C) with C >= 3.
        region: Window to histogram; must lie inside the buffer.

    Returns:
        Array of 256 counts summing to width * height * 3.
    """
    window = pixels[
        region.y : region.bottom,
        region.x : region.right,
        :SCORED_CHANNELS,
    ]
    return np.bincount(window.ravel(), minlength=HISTOGRAM_BINS).astype(np.int64)


def shannon_entropy(histogram: npt.NDArray[Any]) -> float:
    """Compute the Shannon entropy, in bits, of a histogram of counts.

    Empty buckets contribute nothing. An all-zero histogram has entropy 0.
    """
    total = histogram.sum()
    if total == 0:
        return 0.0
    p = histogram[histogram > 0] / total
    # abs() folds the -0.0 produced by a single populated bucket
    return abs(float(-(p * np.log2(p)).sum()))


def region_entropy(pixels: npt.NDArray[np.uint8], region: Region) -> float:
    """Score a region of a pixel buffer by its pooled-channel entropy."""
    return shannon_entropy(intensity_histogram(pixels, region))


class EntropyScorer:
    """Region scorer backed by pooled-channel Shannon entropy.

    Stateless; one instance can be shared across threads.
    """

    __slots__ = ()

    def score(self, pixels: npt.NDArray[np.uint8], region: Region) -> float:
        """Return the entropy of ``region`` in bits, in [0, 8]."""
        return region_entropy(pixels, region)

"""Candidate window enumeration.

Candidate windows overlap their neighbours by half a window along each
axis, which keeps the candidate count at roughly (2W/w) * (2H/h) while
still covering the image densely enough for entropy to find its peak.

Ordering is x-major, y-minor: every y offset for a given x comes before
the next x. The selector keeps the first maximum it sees, so this order is
part of the contract.
"""

from __future__ import annotations

from smartcrop.geometry import Region, Size


def axis_offsets(extent: int, window: int) -> range:
    """Return candidate window offsets along one axis.

    Offsets stride by half the window over [0, extent - window). A window
    of 1 pixel would stride by 0, so the stride never drops below 1.

    Args:
        extent: Image length along the axis.
        window: Window length along the axis.

    Returns:
        Range of window start offsets (empty if window >= extent).
    """
    stride = max(1, window // 2)
    return range(0, max(0, extent - window), stride)


def enumerate_regions(original: Size, target: Size) -> list[Region]:
    """List the candidate windows of ``target`` size inside ``original``.

    Edge policy:
        - Exact match: the whole image is the only candidate.
        - Target larger than the image on either axis: no candidates.
        - Otherwise: the cross product of both axes' offsets, keeping only
          windows with x + w < W and y + h < H. The bound is strict, so a
          window flush with the right or bottom edge is never produced. When
          one axis matches exactly that axis has no offsets at all and the
          result is empty.

    Args:
        original: Source image dimensions.
        target: Window dimensions.

    Returns:
        Candidate regions in x-major, y-minor order.
    """
    if original == target:
        return [Region.at_origin(target)]
    if target.width > original.width or target.height > original.height:
        return []

    w, h = target.width, target.height
    return [
        Region(x=x, y=y, width=w, height=h)
        for x in axis_offsets(original.width, w)
        for y in axis_offsets(original.height, h)
        if x + w < original.width and y + h < original.height
    ]

"""Geometry module for smartcrop.

Key Components:
    - Primitives: Size and Region models in pixel coordinates
    - Validators: Bounds checking before extraction

Example:
    from smartcrop.geometry import GeometryValidator, Region, Size

    region = Region(x=50, y=50, width=100, height=100)
    GeometryValidator().validate(region, Size(width=200, height=200))
"""

from smartcrop.geometry.primitives import Region, Size
from smartcrop.geometry.validators import GeometryValidator, ValidationError

__all__ = [
    "GeometryValidator",
    "Region",
    "Size",
    "ValidationError",
]

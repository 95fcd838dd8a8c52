"""CLI module for smartcrop.

Provides the command-line interface for cropping images and inspecting
the region a crop would keep.
"""

from __future__ import annotations

from smartcrop.cli.main import app

__all__ = ["app"]

"""Detect images that are effectively monochrome."""

from __future__ import annotations

import numpy as np

from image_degrader.core.errors import InvalidArgumentError
from image_degrader.core.grid import PixelGrid

DEFAULT_TOLERANCE = 30


def is_grayscale(grid: PixelGrid, tolerance: int = DEFAULT_TOLERANCE) -> bool:
    """Check whether every pixel's channels lie within `tolerance` of each other.

    A pixel is colored if any of |r-g|, |g-b|, |b-r| exceeds the tolerance.
    Scanning stops at the first row containing such a pixel.
    """
    if tolerance < 0:
        raise InvalidArgumentError(f"tolerance must be >= 0, got {tolerance}")

    for row in grid.pixels:
        # int16 so the channel differences can go negative
        rgb = row.astype(np.int16)
        r, g, b = rgb[:, 0], rgb[:, 1], rgb[:, 2]
        if (
            np.any(np.abs(r - g) > tolerance)
            or np.any(np.abs(g - b) > tolerance)
            or np.any(np.abs(b - r) > tolerance)
        ):
            return False
    return True

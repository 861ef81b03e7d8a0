"""Binary black/white thresholding on Rec. 601 luma."""

from __future__ import annotations

import numpy as np

from image_degrader.core.errors import InvalidArgumentError, NotGrayscaleError
from image_degrader.core.grayscale import DEFAULT_TOLERANCE, is_grayscale
from image_degrader.core.grid import PixelGrid

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


def luminance(pixels: np.ndarray) -> np.ndarray:
    """Integer luma (299R + 587G + 114B) // 1000 for a (..., 3) array."""
    rgb = pixels.astype(np.uint32)
    return (rgb[..., 0] * 299 + rgb[..., 1] * 587 + rgb[..., 2] * 114) // 1000


def apply_threshold(
    grid: PixelGrid,
    threshold: int = 128,
    force: bool = False,
    tolerance: int = DEFAULT_TOLERANCE,
) -> PixelGrid:
    """Convert the grid to pure black and white in place.

    Pixels whose luma is strictly greater than `threshold` become white,
    everything else (including luma == threshold) becomes black.

    Args:
        grid: grid to modify.
        threshold: luma cutoff in [0, 255].
        force: skip the grayscale check.
        tolerance: channel spread allowed by the grayscale check.

    Returns:
        The same grid, for chaining.

    Raises:
        InvalidArgumentError: if threshold is outside [0, 255].
        NotGrayscaleError: if the image looks colored and force is False.
            The grid is left untouched.
    """
    if not 0 <= threshold <= 255:
        raise InvalidArgumentError(f"threshold must be in [0, 255], got {threshold}")

    if not force and not is_grayscale(grid, tolerance):
        raise NotGrayscaleError()

    white = luminance(grid.pixels) > threshold
    grid.pixels[white] = WHITE
    grid.pixels[~white] = BLACK
    return grid

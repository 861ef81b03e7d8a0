"""Floyd-Steinberg error diffusion dithering."""

from __future__ import annotations

import numpy as np
from numba import njit

from image_degrader.core.errors import InvalidArgumentError
from image_degrader.core.grid import PixelGrid


def quantization_levels(levels: int) -> list[int]:
    """Return the per-channel output values for `levels` quantization steps."""
    if levels < 2:
        raise InvalidArgumentError(f"levels must be >= 2, got {levels}")
    step = 255.0 / (levels - 1)
    return [min(255, max(0, round(k * step))) for k in range(levels)]


@njit(cache=True)
def _diffuse(img, x, y, err, weight):
    """Add `err * weight` to pixel (x, y), clamped and truncated to uint8.

    x and y are signed, so x - 1 at the left edge is simply skipped.
    """
    height, width = img.shape[0], img.shape[1]
    if x < 0 or x >= width or y < 0 or y >= height:
        return
    for c in range(3):
        value = img[y, x, c] + err[c] * weight
        img[y, x, c] = np.uint8(min(255.0, max(0.0, value)))


@njit(cache=True)
def _error_diffusion(img, step):
    """Row-major Floyd-Steinberg pass over a (height, width, 3) uint8 array."""
    height, width = img.shape[0], img.shape[1]
    err = np.empty(3, dtype=np.float64)

    for y in range(height):
        for x in range(width):
            for c in range(3):
                old = float(img[y, x, c])
                new = min(255.0, max(0.0, np.round(old / step) * step))
                img[y, x, c] = np.uint8(np.rint(new))
                err[c] = old - new

            _diffuse(img, x + 1, y, err, 7.0 / 16.0)
            _diffuse(img, x - 1, y + 1, err, 3.0 / 16.0)
            _diffuse(img, x, y + 1, err, 5.0 / 16.0)
            _diffuse(img, x + 1, y + 1, err, 1.0 / 16.0)


def floyd_steinberg(grid: PixelGrid, levels: int = 4) -> PixelGrid:
    """Apply Floyd-Steinberg dithering to an RGB grid in place.

    Each channel is quantized independently to `levels` evenly spaced
    values. Pixels are visited row by row, left to right, and every write
    is visible to the pixels visited after it.

    Args:
        grid: grid to modify.
        levels: number of output levels per channel. 2 = pure black/white
                per channel.

    Returns:
        The same grid, for chaining.
    """
    if levels < 2:
        raise InvalidArgumentError(f"levels must be >= 2, got {levels}")

    _error_diffusion(grid.pixels, 255.0 / (levels - 1))
    return grid

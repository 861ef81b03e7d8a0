"""Additive Gaussian noise."""

from __future__ import annotations

import math

import numpy as np

from image_degrader.core.errors import InvalidArgumentError
from image_degrader.core.grid import PixelGrid


def apply_noise(
    grid: PixelGrid,
    sigma: float = 30.0,
    rng: np.random.Generator | None = None,
) -> PixelGrid:
    """Return a copy of `grid` with zero-mean Gaussian noise added.

    Every channel of every pixel gets its own independent draw. Results
    are clamped to [0, 255] and truncated to integers.

    Args:
        grid: source grid, not modified.
        sigma: standard deviation of the noise.
        rng: random generator; a fresh unseeded one is used if omitted.
    """
    if not (math.isfinite(sigma) and sigma >= 0):
        raise InvalidArgumentError(f"sigma must be finite and >= 0, got {sigma}")
    if rng is None:
        rng = np.random.default_rng()

    noise = rng.normal(0.0, sigma, size=grid.pixels.shape)
    noisy = grid.pixels.astype(np.float64) + noise
    return PixelGrid(np.clip(noisy, 0.0, 255.0).astype(np.uint8))

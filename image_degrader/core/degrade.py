"""Lossy resize + blur pass used by aggressive mode."""

from __future__ import annotations

import math

from PIL import Image, ImageFilter

from image_degrader.core.errors import InvalidArgumentError
from image_degrader.core.grid import PixelGrid


def _scaled_size(width: int, height: int, scale: float) -> tuple[int, int]:
    return max(1, round(width * scale)), max(1, round(height * scale))


def resize_cycle(grid: PixelGrid, scale: float = 0.9) -> PixelGrid:
    """Resample to `scale` of the original size and back again.

    Both passes use the bilinear (triangle) filter, so detail lost on the
    way down is not recovered on the way up.
    """
    if not (math.isfinite(scale) and scale > 0):
        raise InvalidArgumentError(
            f"resize scale must be finite and > 0, got {scale}"
        )

    img = grid.to_image()
    small = img.resize(
        _scaled_size(grid.width, grid.height, scale), Image.Resampling.BILINEAR
    )
    restored = small.resize((grid.width, grid.height), Image.Resampling.BILINEAR)
    return PixelGrid.from_image(restored)


def gaussian_blur(grid: PixelGrid, sigma: float = 1.0) -> PixelGrid:
    """Blur with a Gaussian kernel of standard deviation `sigma`."""
    if not (math.isfinite(sigma) and sigma >= 0):
        raise InvalidArgumentError(
            f"blur sigma must be finite and >= 0, got {sigma}"
        )
    if sigma == 0:
        return grid.copy()
    blurred = grid.to_image().filter(ImageFilter.GaussianBlur(radius=sigma))
    return PixelGrid.from_image(blurred)


def degrade(
    grid: PixelGrid, resize_scale: float = 0.9, blur_sigma: float = 1.0
) -> PixelGrid:
    """Downscale, upscale, then blur. Returns a new grid."""
    # Validate both before doing any work
    if not (math.isfinite(resize_scale) and resize_scale > 0):
        raise InvalidArgumentError(
            f"resize scale must be finite and > 0, got {resize_scale}"
        )
    if not (math.isfinite(blur_sigma) and blur_sigma >= 0):
        raise InvalidArgumentError(
            f"blur sigma must be finite and >= 0, got {blur_sigma}"
        )
    return gaussian_blur(resize_cycle(grid, resize_scale), blur_sigma)

"""Mutable RGB pixel grid shared by all transforms."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from PIL import Image


@dataclass
class PixelGrid:
    """A width x height grid of 3-channel 8-bit samples.

    `pixels` is a (height, width, 3) uint8 array in row-major order,
    so a pixel at (x, y) lives at `pixels[y, x]`.
    """

    pixels: np.ndarray

    def __post_init__(self) -> None:
        if self.pixels.ndim != 3 or self.pixels.shape[2] != 3:
            raise ValueError(
                f"Expected a (height, width, 3) array, got shape {self.pixels.shape}"
            )
        if self.pixels.shape[0] == 0 or self.pixels.shape[1] == 0:
            raise ValueError("Grid dimensions must be positive")
        if self.pixels.dtype != np.uint8:
            self.pixels = np.clip(self.pixels, 0, 255).astype(np.uint8)

    @classmethod
    def new(
        cls, width: int, height: int, color: tuple[int, int, int] = (0, 0, 0)
    ) -> PixelGrid:
        """Create a solid-color grid."""
        pixels = np.empty((height, width, 3), dtype=np.uint8)
        pixels[:, :] = color
        return cls(pixels)

    @classmethod
    def from_image(cls, img: Image.Image) -> PixelGrid:
        """Build a grid from a PIL image, dropping alpha."""
        return cls(np.array(img.convert("RGB"), dtype=np.uint8))

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.pixels)

    def copy(self) -> PixelGrid:
        return PixelGrid(self.pixels.copy())

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    def contains(self, x: int, y: int) -> bool:
        """True if (x, y) is inside the grid. Negative coordinates are outside."""
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> tuple[int, int, int]:
        r, g, b = self.pixels[y, x]
        return int(r), int(g), int(b)

    def put(self, x: int, y: int, values: np.ndarray) -> bool:
        """Clamp `values` to [0, 255] and store them at (x, y).

        Fractional values are truncated. Writes outside the grid are
        skipped and reported by returning False.
        """
        if not self.contains(x, y):
            return False
        self.pixels[y, x] = np.clip(values, 0.0, 255.0).astype(np.uint8)
        return True

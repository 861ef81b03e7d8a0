"""Encode a PixelGrid to an image file."""

from __future__ import annotations

from pathlib import Path

from image_degrader.core.grid import PixelGrid
from image_degrader.core.reader import detect_format

DEFAULT_JPEG_QUALITY = 95


def save_image(grid: PixelGrid, output_path: str | Path) -> Path:
    """Save the grid in the format determined by the output file extension."""
    output_path = Path(output_path)
    fmt = detect_format(output_path)

    img = grid.to_image()
    if fmt == "JPEG":
        img.save(str(output_path), format=fmt, quality=DEFAULT_JPEG_QUALITY)
    else:
        img.save(str(output_path), format=fmt)
    return output_path

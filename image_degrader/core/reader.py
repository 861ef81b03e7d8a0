"""Image decoding into a PixelGrid.

Any still format Pillow understands is accepted. Multi-frame inputs
(animated GIF, multi-page TIFF) contribute their first frame only.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from PIL import Image

from image_degrader.core.grid import PixelGrid

# Suffix -> Pillow format name
FORMATS = {
    ".png": "PNG",
    ".jpg": "JPEG",
    ".jpeg": "JPEG",
    ".bmp": "BMP",
    ".gif": "GIF",
    ".tif": "TIFF",
    ".tiff": "TIFF",
    ".webp": "WEBP",
}


@dataclass
class ImageInfo:
    """Metadata about the input file."""

    path: Path
    format: str  # Pillow format name, e.g. "PNG"
    width: int
    height: int
    mode: str  # Mode before RGB conversion, e.g. "RGBA"


def detect_format(path: Path) -> str:
    """Detect image format from file extension."""
    suffix = path.suffix.lower()
    if suffix in FORMATS:
        return FORMATS[suffix]
    raise ValueError(f"Unsupported format: {suffix}")


def load_image(path: str | Path) -> tuple[PixelGrid, ImageInfo]:
    """Open an image file and decode it to an RGB grid.

    Raises:
        FileNotFoundError: if the path does not exist.
        ValueError: if the extension is not a supported image format.
        OSError: if Pillow cannot decode the file.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    fmt = detect_format(path)

    with Image.open(path) as img:
        img.seek(0)
        info = ImageInfo(
            path=path,
            format=img.format or fmt,
            width=img.width,
            height=img.height,
            mode=img.mode,
        )
        grid = PixelGrid.from_image(img)

    return grid, info

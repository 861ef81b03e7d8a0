"""Mode selection and sequencing of the pixel transforms.

threshold: grayscale check -> binary B&W
dither:    Floyd-Steinberg quantization
degrade:   resize down/up -> blur -> Gaussian noise
noise:     Gaussian noise only
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable

import numpy as np

from image_degrader.core.degrade import degrade
from image_degrader.core.dither import floyd_steinberg
from image_degrader.core.errors import InvalidArgumentError
from image_degrader.core.grayscale import DEFAULT_TOLERANCE
from image_degrader.core.grid import PixelGrid
from image_degrader.core.noise import apply_noise
from image_degrader.core.threshold import apply_threshold


class Mode(str, Enum):
    THRESHOLD = "threshold"
    DITHER = "dither"
    DEGRADE = "degrade"
    NOISE = "noise"


@dataclass(frozen=True)
class Settings:
    """Processing settings. Only the fields used by `mode` matter."""

    mode: Mode = Mode.NOISE
    sigma: float = 30.0  # noise std-dev (degrade, noise)
    blur_sigma: float = 1.0  # degrade
    resize_scale: float = 0.9  # degrade
    levels: int = 4  # dither, per channel
    threshold: int = 128  # threshold, 0 to 255
    force: bool = False  # threshold, skip grayscale check
    tolerance: int = DEFAULT_TOLERANCE  # threshold, grayscale check
    seed: int | None = None  # noise RNG seed

    def validate(self) -> None:
        """Raise InvalidArgumentError for any out-of-range field the mode uses."""
        if self.mode == Mode.THRESHOLD:
            if not 0 <= self.threshold <= 255:
                raise InvalidArgumentError(
                    f"threshold must be in [0, 255], got {self.threshold}"
                )
            if self.tolerance < 0:
                raise InvalidArgumentError(
                    f"tolerance must be >= 0, got {self.tolerance}"
                )
        elif self.mode == Mode.DITHER:
            if not 2 <= self.levels <= 255:
                raise InvalidArgumentError(
                    f"levels must be in [2, 255], got {self.levels}"
                )
        else:
            if not (math.isfinite(self.sigma) and self.sigma >= 0):
                raise InvalidArgumentError(
                    f"sigma must be finite and >= 0, got {self.sigma}"
                )
            if self.mode == Mode.DEGRADE:
                if not (math.isfinite(self.resize_scale) and self.resize_scale > 0):
                    raise InvalidArgumentError(
                        f"resize scale must be finite and > 0, got {self.resize_scale}"
                    )
                if not (math.isfinite(self.blur_sigma) and self.blur_sigma >= 0):
                    raise InvalidArgumentError(
                        f"blur sigma must be finite and >= 0, got {self.blur_sigma}"
                    )

    def summary(self) -> dict:
        """Fields relevant to the selected mode, for JSON output."""
        result: dict = {"mode": self.mode.value}
        if self.mode == Mode.THRESHOLD:
            result.update(threshold=self.threshold, force=self.force)
        elif self.mode == Mode.DITHER:
            result.update(levels=self.levels)
        else:
            if self.mode == Mode.DEGRADE:
                result.update(
                    resize_scale=self.resize_scale, blur_sigma=self.blur_sigma
                )
            result.update(sigma=self.sigma, seed=self.seed)
        return result


STATUS_MESSAGES = {
    Mode.THRESHOLD: "Applying Threshold Mode (Binary B&W)...",
    Mode.DITHER: "Applying destructive removal (Quantization + Dithering)...",
    Mode.DEGRADE: "Applying aggressive removal...",
    Mode.NOISE: "Adding Gaussian noise (sigma={sigma})...",
}


def status_message(mode: Mode, settings: Settings) -> str:
    """Human-readable status line for `mode`, filled in from `settings`."""
    return STATUS_MESSAGES[mode].format(sigma=settings.sigma)


def process_image(
    grid: PixelGrid,
    settings: Settings,
    rng: np.random.Generator | None = None,
    on_status: Callable[[str], None] | None = None,
) -> PixelGrid:
    """Run the transform selected by `settings.mode`.

    The input grid is never modified; the result is a new grid of the
    same dimensions.

    Args:
        grid: decoded input image.
        settings: mode and parameters.
        rng: generator for noise; built from `settings.seed` if omitted.
        on_status: optional callback receiving a human-readable status line.
    """
    settings.validate()
    if on_status:
        on_status(status_message(settings.mode, settings))

    if settings.mode == Mode.THRESHOLD:
        return apply_threshold(
            grid.copy(),
            settings.threshold,
            force=settings.force,
            tolerance=settings.tolerance,
        )

    if settings.mode == Mode.DITHER:
        return floyd_steinberg(grid.copy(), settings.levels)

    if rng is None:
        rng = np.random.default_rng(settings.seed)

    if settings.mode == Mode.DEGRADE:
        grid = degrade(grid, settings.resize_scale, settings.blur_sigma)
        if on_status:
            on_status(status_message(Mode.NOISE, settings))

    return apply_noise(grid, settings.sigma, rng)

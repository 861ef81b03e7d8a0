"""Tests for the resize + blur pass."""

import numpy as np
import pytest

from image_degrader.core.degrade import degrade, gaussian_blur, resize_cycle
from image_degrader.core.errors import InvalidArgumentError
from image_degrader.core.grid import PixelGrid


def _checkerboard(size: int = 16) -> PixelGrid:
    board = (np.indices((size, size)).sum(axis=0) % 2 * 255).astype(np.uint8)
    return PixelGrid(np.stack([board] * 3, axis=-1))


class TestResizeCycle:
    def test_preserves_dimensions(self):
        grid = PixelGrid.new(37, 23, (10, 200, 90))
        result = resize_cycle(grid, 0.5)
        assert (result.width, result.height) == (37, 23)

    def test_solid_color_unchanged(self):
        grid = PixelGrid.new(20, 20, (10, 200, 90))
        result = resize_cycle(grid, 0.9)
        assert np.all(np.abs(result.pixels.astype(int) - [10, 200, 90]) <= 1)

    def test_loses_detail(self):
        grid = _checkerboard()
        result = resize_cycle(grid, 0.5)
        assert not np.array_equal(result.pixels, grid.pixels)

    def test_tiny_scale_clamped_to_one_pixel(self):
        result = resize_cycle(PixelGrid.new(3, 3, (50, 50, 50)), 0.01)
        assert (result.width, result.height) == (3, 3)

    @pytest.mark.parametrize("scale", [0.0, -0.5, float("inf"), float("nan")])
    def test_invalid_scale(self, scale):
        with pytest.raises(InvalidArgumentError):
            resize_cycle(PixelGrid.new(4, 4), scale)


class TestGaussianBlur:
    def test_zero_sigma_is_copy(self):
        grid = _checkerboard()
        result = gaussian_blur(grid, 0.0)
        assert result is not grid
        assert np.array_equal(result.pixels, grid.pixels)

    def test_blur_reduces_contrast(self):
        grid = _checkerboard()
        result = gaussian_blur(grid, 2.0)
        assert result.pixels.std() < grid.pixels.std()

    def test_negative_sigma_rejected(self):
        with pytest.raises(InvalidArgumentError):
            gaussian_blur(PixelGrid.new(4, 4), -1.0)

    def test_nan_sigma_rejected(self):
        with pytest.raises(InvalidArgumentError, match="finite"):
            gaussian_blur(PixelGrid.new(4, 4), float("nan"))


class TestDegrade:
    def test_input_untouched(self):
        grid = _checkerboard()
        before = grid.pixels.copy()
        result = degrade(grid, 0.9, 1.0)
        assert np.array_equal(grid.pixels, before)
        assert result.pixels.shape == grid.pixels.shape

    def test_validates_before_work(self):
        with pytest.raises(InvalidArgumentError):
            degrade(PixelGrid.new(4, 4), 0.9, -1.0)

    @pytest.mark.parametrize("scale", [float("inf"), float("nan")])
    def test_non_finite_scale(self, scale):
        with pytest.raises(InvalidArgumentError, match="finite"):
            degrade(PixelGrid.new(4, 4), scale, 1.0)

    @pytest.mark.parametrize("sigma", [float("inf"), float("nan")])
    def test_non_finite_blur_sigma(self, sigma):
        with pytest.raises(InvalidArgumentError, match="finite"):
            degrade(PixelGrid.new(4, 4), 0.9, sigma)

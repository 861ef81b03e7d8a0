"""Exceptions raised by the pixel transforms."""

from __future__ import annotations


class DegradeError(Exception):
    """Base class for core errors. `code` is reported in JSON output."""

    code = "PROCESSING_ERROR"


class InvalidArgumentError(DegradeError, ValueError):
    """A transform parameter is out of range (levels < 2, sigma < 0, ...)."""

    code = "INVALID_ARGUMENT"


class NotGrayscaleError(DegradeError):
    """Threshold mode was requested on an image that looks colored."""

    code = "NOT_GRAYSCALE"

    def __init__(
        self,
        message: str = "Image appears to be color. Use --force-bw to proceed.",
    ) -> None:
        super().__init__(message)

"""Error taxonomy for the pattern service.

Every failure inside the pipeline is terminal for the request that raised it.
The API layer maps each class onto a status code; nothing here knows about HTTP.
"""

from __future__ import annotations


class PatternServiceError(Exception):
    """Base class for all pipeline failures."""


class InvalidModeError(PatternServiceError):
    """Unrecognized output mode segment."""

    def __init__(self, mode: str = "") -> None:
        super().__init__(f"Unknown output mode: {mode!r}" if mode else "Unknown output mode")
        self.mode = mode


class RenderError(PatternServiceError):
    """Malformed or degenerate vector document, or a rendering backend failure."""


class InvalidSizeError(RenderError):
    """Requested pixel size outside the accepted range."""

    def __init__(self, size: int, max_size: int | None = None) -> None:
        if max_size is None:
            msg = f"Pixel size must be positive, got {size}"
        else:
            msg = f"Pixel size must be between 1 and {max_size}, got {size}"
        super().__init__(msg)
        self.size = size
        self.max_size = max_size


class DegenerateImageError(PatternServiceError):
    """Pixel buffer with zero pixels."""


class IterationLimitExceeded(PatternServiceError):
    """Luminance normalization failed to converge."""

    def __init__(self, passes: int, mean_luminance: float) -> None:
        super().__init__(
            f"Luminance normalization did not converge after {passes} passes "
            f"(mean luminance {mean_luminance:.2f})"
        )
        self.passes = passes
        self.mean_luminance = mean_luminance

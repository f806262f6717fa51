"""Luminance normalizer — brighten dark images until they clear a threshold.

Two states. Checking: measure mean luminance; below the threshold, apply one
brightening pass and measure again. Done: at or above the threshold, return.

A brightening pass multiplies each R, G, B channel by 1.1 and floors it,
skipping any channel whose product would exceed 255. Channels therefore never
decrease and never clip. Alpha is never touched.

Channels below 10 cannot grow (floor(9 * 1.1) == 9), so a near-black image
can stall below the threshold. A pass that changes nothing, or running past
``max_passes``, raises IterationLimitExceeded instead of looping forever.
"""

from __future__ import annotations

import logging

import numpy as np

from geoimage.errors import DegenerateImageError, IterationLimitExceeded
from geoimage.render.buffer import PixelBuffer

logger = logging.getLogger(__name__)

LUMINANCE_THRESHOLD = 80.0
BRIGHTEN_FACTOR = 1.1
CHANNEL_MAX = 255.0
DEFAULT_MAX_PASSES = 64

# ITU-R BT.601 luma weights for R, G, B
_LUMA_WEIGHTS = np.array([0.299, 0.587, 0.114], dtype=np.float64)


def mean_luminance(buffer: PixelBuffer) -> float:
    """Average 0.299 R + 0.587 G + 0.114 B over all pixels, on the 0-255 scale."""
    if buffer.pixel_count == 0:
        raise DegenerateImageError("Cannot measure luminance of an empty image")
    return float((buffer.rgb @ _LUMA_WEIGHTS).sum() / buffer.pixel_count)


def normalize(
    buffer: PixelBuffer,
    *,
    threshold: float = LUMINANCE_THRESHOLD,
    max_passes: int = DEFAULT_MAX_PASSES,
) -> PixelBuffer:
    """Brighten ``buffer`` in place until its mean luminance reaches ``threshold``.

    Returns the same buffer. A buffer already at or above the threshold is
    returned untouched.
    """
    mean = mean_luminance(buffer)
    if mean >= threshold:
        return buffer

    rgb = buffer.rgb
    # Scratch space, reused by every pass
    scaled = np.empty(rgb.shape, dtype=np.float64)
    grows = np.empty(rgb.shape, dtype=bool)
    changed = np.empty(rgb.shape, dtype=bool)

    passes = 0
    while mean < threshold:
        if passes >= max_passes:
            raise IterationLimitExceeded(passes, mean)

        np.multiply(rgb, BRIGHTEN_FACTOR, out=scaled)
        np.less_equal(scaled, CHANNEL_MAX, out=grows)
        np.floor(scaled, out=scaled)
        np.not_equal(scaled, rgb, out=changed)
        np.logical_and(changed, grows, out=changed)
        if not changed.any():
            raise IterationLimitExceeded(passes, mean)

        np.copyto(rgb, scaled, casting="unsafe", where=grows)
        passes += 1
        mean = mean_luminance(buffer)
        logger.debug("Brightening pass %d: mean luminance %.2f", passes, mean)

    logger.debug("Normalized after %d passes (mean luminance %.2f)", passes, mean)
    return buffer

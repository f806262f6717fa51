"""Intrinsic size extraction from SVG markup."""

from __future__ import annotations

import logging
import math
import re

from geoimage.errors import RenderError

logger = logging.getLogger(__name__)

_SVG_TAG_RE = re.compile(r"<svg\b[^>]*>", re.IGNORECASE)
_VIEWBOX_RE = re.compile(r'viewBox\s*=\s*"([^"]+)"')
_WIDTH_RE = re.compile(r'\swidth\s*=\s*"([^"]*?)"')
_HEIGHT_RE = re.compile(r'\sheight\s*=\s*"([^"]*?)"')
_LENGTH_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)\s*(px|pt)?\s*")


def _parse_length(text: str) -> float | None:
    match = _LENGTH_RE.fullmatch(text)
    if not match:
        return None
    return float(match.group(1))


def parse_svg_size(svg_text: str) -> tuple[float, float]:
    """Read the intrinsic (width, height) of an SVG document.

    Root ``width``/``height`` attributes win; the ``viewBox`` fills in
    whichever is missing. Raises RenderError when no positive, finite size
    can be determined.
    """
    tag_match = _SVG_TAG_RE.search(svg_text)
    if not tag_match:
        raise RenderError("Document has no <svg> root element")
    root = tag_match.group(0)

    width = height = None
    w_match = _WIDTH_RE.search(root)
    h_match = _HEIGHT_RE.search(root)
    if w_match:
        width = _parse_length(w_match.group(1))
    if h_match:
        height = _parse_length(h_match.group(1))

    if width is None or height is None:
        vb_match = _VIEWBOX_RE.search(root)
        if vb_match:
            parts = vb_match.group(1).replace(",", " ").split()
            if len(parts) == 4:
                try:
                    vb_w, vb_h = float(parts[2]), float(parts[3])
                except ValueError:
                    vb_w = vb_h = None
                if width is None:
                    width = vb_w
                if height is None:
                    height = vb_h

    if width is None or height is None:
        raise RenderError("Document has no intrinsic size")
    if not (math.isfinite(width) and math.isfinite(height)) or width <= 0 or height <= 0:
        raise RenderError(f"Degenerate intrinsic size {width}x{height}")

    logger.debug("Intrinsic size %.2fx%.2f", width, height)
    return width, height

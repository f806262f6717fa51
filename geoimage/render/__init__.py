"""Raster pipeline: rasterize, normalize luminance, encode."""

from geoimage.render.backend import init_backend
from geoimage.render.buffer import PNG_MEDIA_TYPE, PixelBuffer
from geoimage.render.luminance import mean_luminance, normalize
from geoimage.render.rasterizer import compute_zoom, rasterize

__all__ = [
    "init_backend",
    "PNG_MEDIA_TYPE",
    "PixelBuffer",
    "mean_luminance",
    "normalize",
    "compute_zoom",
    "rasterize",
]

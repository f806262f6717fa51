"""PixelBuffer — an owned, mutable RGBA image.

Row-major ``(height, width, 4)`` uint8 array. The rasterizer creates it, the
luminance normalizer mutates its R, G, B channels in place, and the PNG
encoder reads it. One buffer per request, never shared.
"""

from __future__ import annotations

import io
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray
from PIL import Image

PNG_MEDIA_TYPE = "image/png"

# Channel indices
R, G, B, A = 0, 1, 2, 3


@dataclass
class PixelBuffer:
    data: NDArray[np.uint8]

    def __post_init__(self) -> None:
        if self.data.dtype != np.uint8 or self.data.ndim != 3 or self.data.shape[2] != 4:
            raise ValueError(
                f"PixelBuffer needs a (height, width, 4) uint8 array, "
                f"got {self.data.shape} {self.data.dtype}"
            )

    @classmethod
    def blank(cls, width: int, height: int, fill: tuple[int, int, int, int] = (0, 0, 0, 255)) -> PixelBuffer:
        data = np.empty((height, width, 4), dtype=np.uint8)
        data[...] = fill
        return cls(data)

    @classmethod
    def from_png(cls, png_data: bytes) -> PixelBuffer:
        """Decode PNG bytes into a fresh RGBA buffer."""
        image = Image.open(io.BytesIO(png_data)).convert("RGBA")
        return cls(np.array(image, dtype=np.uint8))

    def to_png(self) -> bytes:
        """Encode as lossless PNG."""
        out = io.BytesIO()
        Image.fromarray(self.data).save(out, format="PNG")
        return out.getvalue()

    @property
    def width(self) -> int:
        return int(self.data.shape[1])

    @property
    def height(self) -> int:
        return int(self.data.shape[0])

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @property
    def rgb(self) -> NDArray[np.uint8]:
        """Writable view of the colour channels; alpha excluded."""
        return self.data[..., :3]

    @property
    def alpha(self) -> NDArray[np.uint8]:
        return self.data[..., A]

    def channel(self, index: int) -> NDArray[np.uint8]:
        return self.data[..., index]

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        r, g, b, a = self.data[y, x]
        return int(r), int(g), int(b), int(a)

    def __len__(self) -> int:
        # Interleaved byte length, always a multiple of 4
        return int(self.data.size)

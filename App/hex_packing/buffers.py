"""Pixel containers shared by the thresholding and packing stages.

AIDEV-NOTE: PixelBuffer holds raw RGBA data as a (height, width, 4) uint8
array. BinaryMask is the only type the packer accepts; building one proves
every R, G and B value is exactly 0 or 255.
"""

from dataclasses import dataclass
from typing import Sequence

import numpy as np
from PIL import Image

from .errors import InvalidMaskValueError

CHANNELS = 4
BLACK = 0
WHITE = 255


@dataclass(eq=False)
class PixelBuffer:
    """RGBA pixel data, row-major with the origin at the top left."""

    width: int
    height: int
    data: np.ndarray  # shape (height, width, 4), dtype uint8

    def __post_init__(self):
        expected = (self.height, self.width, CHANNELS)
        if self.data.shape != expected:
            raise ValueError(
                f"Pixel data has shape {self.data.shape}, expected {expected}"
            )
        if self.data.dtype != np.uint8:
            self.data = self.data.astype(np.uint8)

    @classmethod
    def from_flat(cls, width: int, height: int, values: Sequence[int]) -> "PixelBuffer":
        """Build a buffer from a flat R,G,B,A,R,G,B,A... sequence."""
        data = np.asarray(values, dtype=np.uint8)
        if data.size != width * height * CHANNELS:
            raise ValueError(
                f"Expected {width * height * CHANNELS} channel values for "
                f"{width}x{height} image, got {data.size}"
            )
        return cls(width, height, data.reshape(height, width, CHANNELS).copy())

    @classmethod
    def from_image(cls, image: Image.Image) -> "PixelBuffer":
        """Build a buffer from a PIL image (converted to RGBA if needed)."""
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        width, height = image.size
        return cls(width, height, np.array(image, dtype=np.uint8))

    def to_image(self) -> Image.Image:
        """Return the buffer as an RGBA PIL image."""
        return Image.fromarray(self.data)

    def red(self, x: int, y: int) -> int:
        """Red channel value at (x, y)."""
        return int(self.data[y, x, 0])


@dataclass(frozen=True)
class BinaryMask:
    """A PixelBuffer whose color channels hold only black or white."""

    buffer: PixelBuffer

    def __post_init__(self):
        """Check every R, G and B value is 0 or 255.

        Raises:
            InvalidMaskValueError: For the first pixel (row-major) with a
                color channel other than 0 or 255
        """
        rgb = self.buffer.data[..., :3]
        invalid = (rgb != BLACK) & (rgb != WHITE)
        if invalid.any():
            y, x, channel = (int(i) for i in np.argwhere(invalid)[0])
            raise InvalidMaskValueError(x, y, int(rgb[y, x, channel]))

    @property
    def width(self) -> int:
        return self.buffer.width

    @property
    def height(self) -> int:
        return self.buffer.height

    @classmethod
    def from_buffer(cls, buffer: PixelBuffer) -> "BinaryMask":
        """Wrap a buffer that is already black and white."""
        return cls(buffer)

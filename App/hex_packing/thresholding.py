"""Black-and-white thresholding of RGBA pixel buffers.

AIDEV-NOTE: A pixel turns black when the sum of its normalized R, G and B
values is below the cutoff, white otherwise. Alpha is never read or written.
"""

import numpy as np

from .buffers import BLACK, WHITE, BinaryMask, PixelBuffer


def threshold(buffer: PixelBuffer, cutoff: float) -> PixelBuffer:
    """Reduce a buffer to pure black and white in place.

    Args:
        buffer: RGBA pixel buffer, modified in place
        cutoff: Sum threshold in the range of r+g+b (0.0-3.0). Values <= 0
            make every pixel white, values > 3 make every pixel black.

    Returns:
        The same buffer, for chaining
    """
    rgb = buffer.data[..., :3]
    r = rgb[..., 0] / 255
    g = rgb[..., 1] / 255
    b = rgb[..., 2] / 255

    dark = (r + g + b) < cutoff
    rgb[...] = np.where(dark[..., np.newaxis], BLACK, WHITE).astype(np.uint8)

    return buffer


def to_mask(buffer: PixelBuffer, cutoff: float) -> BinaryMask:
    """Threshold a buffer and wrap it as a BinaryMask."""
    return BinaryMask(threshold(buffer, cutoff))

"""Bitmap to packed-hex C array conversion.

AIDEV-NOTE: This package turns black and white bitmaps into C arrays for
display firmware. Organized into modular components:
- processor: Main BitmapConverter orchestrator
- thresholding: RGB(A) to black/white mask
- packing: Batch packing of mask columns into hex bytes
- bin2hex: Binary string to hex digits
- rendering: C array text output
- utils: Output names, image loading, directories
"""

from .bin2hex import binary_to_hex
from .buffers import BinaryMask, PixelBuffer
from .errors import (
    ConversionError,
    DimensionMismatchError,
    ImageLoadError,
    InvalidInputError,
    InvalidMaskValueError,
    InvalidOutputNameError,
    OutputWriteError,
)
from .packing import pack, validate_dimensions
from .processor import BitmapConverter
from .rendering import render_c_array
from .thresholding import threshold, to_mask

__all__ = [
    "BinaryMask",
    "BitmapConverter",
    "ConversionError",
    "DimensionMismatchError",
    "ImageLoadError",
    "InvalidInputError",
    "InvalidMaskValueError",
    "InvalidOutputNameError",
    "OutputWriteError",
    "PixelBuffer",
    "binary_to_hex",
    "pack",
    "render_c_array",
    "threshold",
    "to_mask",
    "validate_dimensions",
]

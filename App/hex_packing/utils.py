"""Helpers for names, files and image loading around the packing core."""

import re
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from models import ACCEPTED_FORMATS

from .buffers import PixelBuffer
from .errors import ImageLoadError, InvalidOutputNameError

C_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z_0-9]*$")


def validate_output_name(name: str) -> str:
    """Turn an output name into a C identifier.

    Anything from the first '.' on is treated as a file extension and
    dropped, so "logo.png" becomes "logo".

    Returns:
        The name without extension

    Raises:
        InvalidOutputNameError: If the result is not a valid C identifier
    """
    stem = name.split(".", 1)[0]
    if not C_IDENTIFIER.match(stem):
        raise InvalidOutputNameError(name)
    return stem


def load_image(file_path: "str | Path") -> PixelBuffer:
    """Load an image file into an RGBA PixelBuffer.

    Raises:
        ImageLoadError: If the file is missing, not a regular file, cannot
            be decoded, or is not an accepted format
    """
    path = Path(file_path)
    if not path.exists():
        raise ImageLoadError(path, "file not found")
    if not path.is_file():
        raise ImageLoadError(path, "input value is not a file")

    try:
        with Image.open(path) as image:
            if image.format not in ACCEPTED_FORMATS:
                raise ImageLoadError(
                    path, f"{image.format} is not an acceptable input file type"
                )
            # AIDEV-NOTE: Always convert to RGBA for consistent processing
            return PixelBuffer.from_image(image.convert("RGBA"))
    except (UnidentifiedImageError, OSError) as e:
        raise ImageLoadError(path, str(e)) from e


def ensure_dir(directory: "str | Path") -> Path:
    """Create a directory (and parents) if it doesn't exist yet."""
    path = Path(directory)
    path.mkdir(parents=True, exist_ok=True)
    return path

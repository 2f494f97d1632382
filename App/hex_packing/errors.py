"""Error types raised by the bitmap-to-hex conversion pipeline.

AIDEV-NOTE: Every error subclasses ConversionError (itself a ValueError) so
callers can catch the whole family at once. Each error keeps the values
needed to diagnose it as attributes.
"""


class ConversionError(ValueError):
    """Base class for all conversion failures."""


class DimensionMismatchError(ConversionError):
    """Image size is not divisible into whole batches."""

    def __init__(self, width: int, height: int, batch_width: int, batch_height: int):
        self.width = width
        self.height = height
        self.batch_width = batch_width
        self.batch_height = batch_height

        problems = []
        if width % batch_width != 0:
            problems.append(
                f"image width ({width}) not divisible by batch width ({batch_width})"
            )
        if height % batch_height != 0:
            problems.append(
                f"image height ({height}) not divisible by batch height ({batch_height})"
            )
        super().__init__("Invalid image size: " + "; ".join(problems))


class InvalidMaskValueError(ConversionError):
    """A mask pixel is neither pure black (0) nor pure white (255)."""

    def __init__(self, x: int, y: int, value):
        self.x = x
        self.y = y
        self.value = value
        super().__init__(
            f"Invalid image format or color palette: pixel ({x}, {y}) "
            f"has value {value}, expected 0 or 255"
        )


class InvalidInputError(ConversionError):
    """A binary string contains something other than '0' or '1'."""

    def __init__(self, character: str, position: int):
        self.character = character
        self.position = position
        super().__init__(
            f"Invalid binary digit {character!r} at position {position}"
        )


class InvalidOutputNameError(ConversionError):
    """Output name is not usable as a C identifier."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Invalid output name {name!r}. "
            "Output must be a valid C-style variable name."
        )


class ImageLoadError(ConversionError):
    """Input image is missing, unreadable or of an unsupported type."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load image {path}: {reason}")


class OutputWriteError(ConversionError):
    """Converted data or the preview image could not be written."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write {path}: {reason}")

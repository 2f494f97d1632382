"""Data models and constants for the png-to-hex converter."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

# Conversion defaults
DEFAULT_OUTPUT = "image"
DEFAULT_OUTPUT_DIR = "./output"
DEFAULT_OUTPUT_EXT = "txt"
DEFAULT_THRESHOLD = 1.7  # r+g+b, each normalized to 0-1
DEFAULT_BATCH_WIDTH = 5  # px
DEFAULT_BATCH_HEIGHT = 8  # px
DEFAULT_PREVIEW_DIR = "./preview"
DEFAULT_PREVIEW_EXT = "png"

# AIDEV-NOTE: Pillow format names accepted as input. Only PNG for now.
ACCEPTED_FORMATS = ("PNG",)

# Configuration file path
CONFIG_FILE = Path("png2hex.json")


@dataclass(frozen=True)
class BatchGeometry:
    """Size of one batch (tile) of the mask, in pixels."""

    batch_width: int
    batch_height: int

    def __post_init__(self):
        for name in ("batch_width", "batch_height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")


@dataclass(frozen=True)
class ConversionConfig:
    """Options for a single conversion run.

    AIDEV-NOTE: Immutable. Build a new one with dataclasses.replace()
    instead of mutating, so the pipeline never sees shared state.
    """

    # Output symbol and file
    output: str = DEFAULT_OUTPUT
    output_dir: str = DEFAULT_OUTPUT_DIR
    output_ext: str = DEFAULT_OUTPUT_EXT
    minify: bool = False

    # Black & white cutoff
    threshold: float = DEFAULT_THRESHOLD

    # Batch size
    batch_width: int = DEFAULT_BATCH_WIDTH
    batch_height: int = DEFAULT_BATCH_HEIGHT

    # Thresholded preview image
    preview: bool = False
    preview_dir: str = DEFAULT_PREVIEW_DIR
    preview_ext: str = DEFAULT_PREVIEW_EXT

    def __post_init__(self):
        for name in ("output", "output_dir", "output_ext", "preview_dir", "preview_ext"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ValueError(f"{name} must be a string, got {value!r}")
        for name in ("minify", "preview"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ValueError(f"{name} must be true or false, got {value!r}")
        if isinstance(self.threshold, bool) or not isinstance(self.threshold, (int, float)):
            raise ValueError(f"threshold must be a number, got {self.threshold!r}")
        # Raises ValueError for non-positive batch sizes
        BatchGeometry(self.batch_width, self.batch_height)

    @property
    def geometry(self) -> BatchGeometry:
        return BatchGeometry(self.batch_width, self.batch_height)


@dataclass
class OutputGrid:
    """Packed batches ready for rendering.

    AIDEV-NOTE: batches are ordered row-major over the batch grid (all
    batches of the top batch row first). Each holds batch_width hex strings
    without the 0x prefix.
    """

    batches: "list[list[str]]"
    geometry: BatchGeometry

    # Declared size in batches
    width: int = 0
    height: int = 0

    @property
    def batch_width(self) -> int:
        return self.geometry.batch_width

    @property
    def batch_height(self) -> int:
        return self.geometry.batch_height

    @property
    def total_bits(self) -> int:
        """Number of pixels encoded by the grid."""
        return len(self.batches) * self.batch_width * self.batch_height


@dataclass
class ConversionResult:
    """Result of converting one image file."""

    grid: OutputGrid
    text: str
    output_path: Path
    preview_path: Optional[Path] = None

    # Source image dimensions (pixels)
    image_width: int = 0
    image_height: int = 0

    # Name the array was declared with
    name: str = field(default=DEFAULT_OUTPUT)

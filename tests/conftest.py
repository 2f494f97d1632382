import numpy as np
import pytest
from PIL import Image

from hex_packing import PixelBuffer


def make_buffer(rows):
    """Build a PixelBuffer from rows of 'B' (black) / 'W' (white) characters."""
    height = len(rows)
    width = len(rows[0])
    data = np.zeros((height, width, 4), dtype=np.uint8)
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            value = 0 if char == "B" else 255
            data[y, x] = (value, value, value, 255)
    return PixelBuffer(width, height, data)


@pytest.fixture
def buffer_from_rows():
    return make_buffer


@pytest.fixture
def write_png(tmp_path):
    """Returns a callable that saves rows of 'B'/'W' as a PNG and returns its path"""

    def _write(rows, name="sprite.png"):
        path = tmp_path / name
        make_buffer(rows).to_image().save(path, format="PNG")
        return path

    return _write


@pytest.fixture
def config_dirs(tmp_path):
    """Output and preview directories under tmp_path"""
    return {
        "output_dir": str(tmp_path / "output"),
        "preview_dir": str(tmp_path / "preview"),
    }


@pytest.fixture
def gray_image():
    return Image.new("RGBA", (4, 4), (128, 128, 128, 255))

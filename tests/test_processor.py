from dataclasses import replace

import pytest
from PIL import Image

from hex_packing import (
    BitmapConverter,
    DimensionMismatchError,
    InvalidOutputNameError,
    OutputWriteError,
    PixelBuffer,
)
from models import ConversionConfig


@pytest.fixture
def config(config_dirs):
    return ConversionConfig(batch_width=2, batch_height=2, **config_dirs)


def test_all_black_end_to_end(write_png, config):
    path = write_png(["BB", "BB"])
    result = BitmapConverter(replace(config, output="dot")).convert(path)

    assert result.grid.batches == [["3", "3"]]
    assert (result.grid.width, result.grid.height) == (1, 1)
    assert (result.image_width, result.image_height) == (2, 2)
    assert result.name == "dot"
    assert result.preview_path is None
    assert result.output_path.name == "dot.txt"
    assert result.output_path.read_bytes() == (
        b"static const unsigned int dot_width = 1;\r\n"
        b"static const unsigned int dot_height = 1;\r\n"
        b"static const byte dot[][2] = {\r\n"
        b"  {0x3, 0x3}\r\n"
        b"};"
    )


def test_output_extension_and_name_are_configurable(write_png, config):
    converter = BitmapConverter(replace(config, output="logo.png", output_ext="h", minify=True))
    result = converter.convert(write_png(["WB", "BW"]))

    assert result.output_path.name == "logo.h"
    assert result.text.endswith("static const byte logo[][2] = {{0x2,0x1}};")


def test_preview_is_written(write_png, config):
    result = BitmapConverter(replace(config, preview=True)).convert(write_png(["BW", "WB"]))

    assert result.preview_path.name == "image.png"
    with Image.open(result.preview_path) as preview:
        assert preview.size == (2, 2)
        assert preview.convert("RGBA").getpixel((0, 0)) == (0, 0, 0, 255)
        assert preview.convert("RGBA").getpixel((1, 0)) == (255, 255, 255, 255)


def test_dimension_mismatch_writes_nothing(write_png, config, tmp_path):
    with pytest.raises(DimensionMismatchError):
        BitmapConverter(replace(config, batch_width=3)).convert(write_png(["BB", "BB"]))
    assert not (tmp_path / "output").exists()


def test_invalid_name_fails_before_reading(tmp_path, config):
    with pytest.raises(InvalidOutputNameError):
        BitmapConverter(replace(config, output="9lives")).convert(tmp_path / "missing.png")


def test_gray_pixels_are_thresholded(tmp_path, config):
    path = tmp_path / "gray.png"
    Image.new("RGB", (2, 2), (200, 200, 200)).save(path)

    assert BitmapConverter(config).convert(path).grid.batches == [["0", "0"]]
    dark = BitmapConverter(replace(config, threshold=2.9)).convert(path)
    assert dark.grid.batches == [["3", "3"]]


def test_convert_buffer_without_io(buffer_from_rows):
    converter = BitmapConverter(ConversionConfig(batch_width=1, batch_height=4))
    grid = converter.convert_buffer(buffer_from_rows(["B", "W", "W", "W"]))
    assert grid.batches == [["1"]]


def test_convert_many_names_outputs_after_files(write_png, config):
    first = write_png(["BB", "BB"], name="first.png")
    second = write_png(["WW", "WW"], name="second.png")

    results = BitmapConverter(config).convert_many([first, second])

    assert [r.name for r in results] == ["first", "second"]
    assert [r.output_path.name for r in results] == ["first.txt", "second.txt"]
    assert results[1].grid.batches == [["0", "0"]]


def test_default_config():
    converter = BitmapConverter()
    assert converter.config.threshold == 1.7
    assert (converter.config.batch_width, converter.config.batch_height) == (5, 8)


def test_convert_buffer_modifies_buffer_in_place(gray_image):
    buffer = PixelBuffer.from_image(gray_image)
    BitmapConverter(ConversionConfig(batch_width=2, batch_height=2)).convert_buffer(buffer)
    assert (buffer.data[..., :3] == 0).all()


def test_unwritable_output_raises_conversion_error(write_png, config, tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")

    with pytest.raises(OutputWriteError) as exc_info:
        BitmapConverter(replace(config, output_dir=str(blocker))).convert(write_png(["BB", "BB"]))

    assert isinstance(exc_info.value.__cause__, OSError)

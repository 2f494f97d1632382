import numpy as np
import pytest

from hex_packing import BinaryMask, InvalidMaskValueError, PixelBuffer


def test_from_flat_is_row_major():
    values = [
        1, 2, 3, 4, 5, 6, 7, 8,
        9, 10, 11, 12, 13, 14, 15, 16,
    ]
    buffer = PixelBuffer.from_flat(2, 2, values)
    assert buffer.data[0, 1].tolist() == [5, 6, 7, 8]
    assert buffer.data[1, 0].tolist() == [9, 10, 11, 12]
    assert buffer.red(1, 1) == 13


def test_from_flat_rejects_wrong_length():
    with pytest.raises(ValueError):
        PixelBuffer.from_flat(2, 2, [0] * 15)


def test_shape_must_match_size():
    with pytest.raises(ValueError):
        PixelBuffer(3, 2, np.zeros((3, 2, 4), dtype=np.uint8))


def test_image_round_trip(gray_image):
    buffer = PixelBuffer.from_image(gray_image.convert("RGB"))
    assert buffer.data.shape == (4, 4, 4)
    assert buffer.to_image().mode == "RGBA"
    assert buffer.to_image().getpixel((0, 0)) == (128, 128, 128, 255)


def test_binary_mask_rejects_gray_value(buffer_from_rows):
    buffer = buffer_from_rows(["BW", "WB"])
    buffer.data[1, 0, 2] = 128

    with pytest.raises(InvalidMaskValueError) as exc_info:
        BinaryMask.from_buffer(buffer)

    assert (exc_info.value.x, exc_info.value.y) == (0, 1)
    assert exc_info.value.value == 128


def test_binary_mask_accepts_black_and_white(buffer_from_rows):
    mask = BinaryMask.from_buffer(buffer_from_rows(["BW", "WB"]))
    assert (mask.width, mask.height) == (2, 2)


def test_binary_mask_constructor_validates(buffer_from_rows):
    buffer = buffer_from_rows(["BW"])
    buffer.data[0, 1, 0] = 128

    with pytest.raises(InvalidMaskValueError) as exc_info:
        BinaryMask(buffer)

    assert (exc_info.value.x, exc_info.value.y) == (1, 0)

"""Batch packing of binary masks into hex byte rows.

AIDEV-NOTE: The mask is cut into batch_width x batch_height tiles. Each tile
column becomes one byte: the column is read top to bottom ('1' = black),
reversed so the bottom pixel is the most significant bit, then hex encoded.
"""

from models import BatchGeometry, OutputGrid

from .bin2hex import binary_to_hex
from .buffers import BLACK, WHITE, BinaryMask
from .errors import DimensionMismatchError, InvalidInputError, InvalidMaskValueError


def validate_dimensions(width: int, height: int, geometry: BatchGeometry) -> None:
    """Check that an image splits into whole batches.

    Raises:
        DimensionMismatchError: If width or height is not a multiple of the
            batch size
    """
    if width % geometry.batch_width != 0 or height % geometry.batch_height != 0:
        raise DimensionMismatchError(
            width, height, geometry.batch_width, geometry.batch_height
        )


def column_bits(mask: BinaryMask, x: int, y: int, length: int) -> str:
    """Read `length` pixels down from (x, y) as a '0'/'1' string.

    Raises:
        InvalidMaskValueError: If a red value is neither 0 nor 255
    """
    bits = []
    for j in range(length):
        value = mask.buffer.red(x, y + j)
        if value == WHITE:
            bits.append("0")
        elif value == BLACK:
            bits.append("1")
        else:
            raise InvalidMaskValueError(x, y + j, value)
    return "".join(bits)


def pack(mask: BinaryMask, geometry: BatchGeometry) -> OutputGrid:
    """Pack a binary mask into batches of hex bytes.

    Args:
        mask: Black and white mask
        geometry: Batch size; must divide the mask size exactly

    Returns:
        OutputGrid with (W/bw)*(H/bh) batches of bw bytes each

    Raises:
        DimensionMismatchError: Before any packing, if the size doesn't fit
        InvalidMaskValueError: If a pixel isn't pure black or white
    """
    validate_dimensions(mask.width, mask.height, geometry)

    bw = geometry.batch_width
    bh = geometry.batch_height
    batches = []

    for y in range(0, mask.height, bh):
        for x in range(0, mask.width, bw):
            fragment = []
            for i in range(bw):
                bits = column_bits(mask, x + i, y, bh)
                try:
                    fragment.append(binary_to_hex(bits[::-1]))
                except InvalidInputError as e:
                    raise InvalidMaskValueError(
                        x + i, y + bh - 1 - e.position, e.character
                    ) from e
            batches.append(fragment)

    return OutputGrid(
        batches=batches,
        geometry=geometry,
        width=mask.width // bw,
        height=mask.height // bh,
    )

"""Binary string to hexadecimal conversion."""

from .errors import InvalidInputError

HEX_DIGITS = "0123456789ABCDEF"


def _group_value(bits: str, offset: int) -> int:
    """Read a group of binary digits as an integer.

    Args:
        bits: Group of '0'/'1' characters
        offset: Position of the group within the full string (for errors)
    """
    value = 0
    for k, char in enumerate(bits):
        if char != "0" and char != "1":
            raise InvalidInputError(char, offset + k)
        value = value * 2 + (1 if char == "1" else 0)
    return value


def binary_to_hex(bits: str) -> str:
    """Convert a string of '0'/'1' characters to hexadecimal digits.

    The string is read from the right in groups of four, one hex digit per
    group, most significant group first in the result. A leftover head of
    one to three characters is written as its plain value ('0'..'7'),
    so "111" gives "7" and "10001" gives "11".

    Args:
        bits: Binary digits, most significant first. May be empty.

    Returns:
        Uppercase hex digits without a ``0x`` prefix ("" for empty input)

    Raises:
        InvalidInputError: If a character other than '0' or '1' is found
    """
    digits = []
    end = len(bits)

    while end >= 4:
        digits.append(HEX_DIGITS[_group_value(bits[end - 4 : end], end - 4)])
        end -= 4

    # AIDEV-NOTE: Remainder is emitted as a bare decimal digit, never padded.
    # Existing firmware assets depend on this exact text.
    if end > 0:
        digits.append(str(_group_value(bits[:end], 0)))

    return "".join(reversed(digits))

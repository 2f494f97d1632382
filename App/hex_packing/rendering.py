"""Render packed batches as a C array declaration.

Output shape (CRLF line endings)::

    static const unsigned int {name}_width = {width};
    static const unsigned int {name}_height = {height};
    static const byte {name}[][{batch_width}] = {
      {0x1F, 0x0, ...},
      ...
    };
"""

from models import OutputGrid

NEWLINE = "\r\n"
INDENT = "  "


def format_byte(hex_digits: str) -> str:
    """Prefix encoder output with 0x (no padding, so '3' gives '0x3')."""
    return "0x" + hex_digits


def render_c_array(grid: OutputGrid, name: str, minify: bool = False) -> str:
    """Serialize an OutputGrid as C source.

    Args:
        grid: Packed batches
        name: C identifier used for the array and its size constants
        minify: Drop optional whitespace inside the array body

    Returns:
        C source text
    """

    def _min(value: str) -> str:
        return "" if minify else value

    parts = [
        f"static const unsigned int {name}_width = {grid.width};{NEWLINE}",
        f"static const unsigned int {name}_height = {grid.height};{NEWLINE}",
        f"static const byte {name}[][{grid.batch_width}] = {{",
        _min(NEWLINE),
    ]

    last = len(grid.batches) - 1
    for index, batch in enumerate(grid.batches):
        row = ("," + _min(" ")).join(format_byte(b) for b in batch)
        parts.append(_min(INDENT) + "{" + row + "}")
        parts.append("," if index < last else "")
        parts.append(_min(NEWLINE))

    parts.append("};")
    return "".join(parts)

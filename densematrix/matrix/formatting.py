"""
Text rendering of matrices.

One line per row, cells joined by tabs, each cell printed with three
significant digits in a field at least four characters wide. Negative
zero prints as 0 so that sign-flipped zeros (from negation or
elimination) do not clutter the output.
"""

import math

from densematrix.core.protocols import Rectangle

CELL_FORMAT = "4.3g"


def format_cell(value: float) -> str:
    # Sign bit, not equality: -0.0 == 0.0
    if value == 0 and math.copysign(1.0, value) < 0:
        value = 0.0
    return format(value, CELL_FORMAT)


def format_matrix(matrix: Rectangle) -> str:
    """Render a rectangle in the textual output format."""
    return "".join(
        "\t".join(format_cell(value) for value in row) + "\n"
        for row in matrix.to_numpy().tolist()
    )

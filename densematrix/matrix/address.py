"""
Row and column addresses.

An address names a whole row or column of a matrix:

    R<n>    row n, full width       (1 x width view)
    C<n>    column n, full height   (height x 1 view)

n is a 1-based unsigned decimal integer. Whitespace around the address
and between the letter and the number is ignored.
"""

from __future__ import annotations

import re
from typing import Literal, NamedTuple

from densematrix.core.exceptions import AddressError, OutOfRangeError
from densematrix.matrix.matrix import Matrix
from densematrix.matrix.view import MatrixView

ROW = 'R'
COLUMN = 'C'

_ADDRESS_PATTERN = re.compile(r"([RC])\s*([0-9]+)")


class Address(NamedTuple):
    kind: Literal['R', 'C']
    index: int


def parse_address(text: str) -> Address:
    """
    Parse 'R3' or 'C5' into an Address.

    Raises:
        AddressError: If text is not of the form R<n> or C<n>
    """
    if not isinstance(text, str):
        raise AddressError(
            f"address must be a string, got {type(text).__name__}", address=text
        )
    match = _ADDRESS_PATTERN.fullmatch(text.strip())
    if match is None:
        raise AddressError(
            f"address format incorrect: {text!r} (expected R<n> or C<n>)",
            address=text,
        )
    return Address(match.group(1), int(match.group(2)))


def address(matrix: Matrix | MatrixView, text: str) -> MatrixView:
    """
    View of the row or column named by text.

    Raises:
        AddressError: If text is malformed
        OutOfRangeError: If the row/column number is outside the matrix
    """
    kind, index = parse_address(text)
    if kind == ROW:
        if not 1 <= index <= matrix.height:
            raise OutOfRangeError(
                f"row {index} is outside the {matrix.height}x{matrix.width} matrix"
            )
        return MatrixView(matrix, index, 1, index, matrix.width)

    if not 1 <= index <= matrix.width:
        raise OutOfRangeError(
            f"column {index} is outside the {matrix.height}x{matrix.width} matrix"
        )
    return MatrixView(matrix, 1, index, matrix.height, index)

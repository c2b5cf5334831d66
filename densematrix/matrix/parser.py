"""
Textual matrix input.

Format:
    - whitespace-separated real numbers, one row per line
    - a blank line (empty or whitespace only) or end-of-stream ends the matrix
    - the first row fixes the width; every later row must match it

Within a line, numbers are read left to right and reading stops at the
first token that is not a number; the rest of that line is ignored. A
number is a decimal literal as float() reads it, so "nan", "inf" and
"infinity" count; underscore digit grouping ("1_000") does not.

The stream is consumed line by line, so whatever follows the terminating
blank line is left unread for the caller.
"""

import io
from typing import TextIO

from densematrix.core.exceptions import ShapeMismatchError
from densematrix.matrix.matrix import Matrix


def parse_row(line: str) -> list[float]:
    """Leading numbers of a line, stopping at the first non-numeric token."""
    row = []
    for token in line.split():
        if "_" in token:
            break
        try:
            row.append(float(token))
        except ValueError:
            break
    return row


def parse_matrix(stream: TextIO) -> Matrix:
    """
    Read one matrix from a text stream.

    Args:
        stream: Text stream positioned at the first row

    Returns:
        Matrix with one row per non-blank line read

    Raises:
        ShapeMismatchError: If a row's count differs from the first row's
    """
    rows: list[list[float]] = []
    width: int | None = None

    for line_number, line in enumerate(iter(stream.readline, ''), start=1):
        if not line.strip():
            break
        row = parse_row(line)
        if width is None:
            width = len(row)
        elif len(row) != width:
            raise ShapeMismatchError(
                f"line {line_number}: matrix must have uniform width, "
                f"expected {width} numbers, got {len(row)}"
            )
        rows.append(row)

    return Matrix(rows)


def parse_text(text: str) -> Matrix:
    """parse_matrix() over a string."""
    return parse_matrix(io.StringIO(text))

"""
Interactive polynomial fit.

Reads one "x y" pair per line until a blank line, then the polynomial
order, and prints the data, the Vandermonde matrix V, Vᵀ, VᵀV and the
fitted polynomial.

Usage:
    densematrix-polyfit [--order N] [--summary] [--quiet] < points.txt
    python -m densematrix
"""

import argparse
import sys
from typing import TextIO

from densematrix.core.exceptions import DenseMatrixError, ValidationError
from densematrix.matrix import parse_matrix
from densematrix.polyfit import PolyfitDesign, fit


def _parse_args(args=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="densematrix-polyfit",
        description="Fit a polynomial to (x, y) pairs read from standard input",
    )
    parser.add_argument(
        "--order",
        type=int,
        default=None,
        help="Polynomial order (prompted for when omitted)",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print standard errors and p-values of the coefficients",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Print only the fitted polynomial",
    )
    return parser.parse_args(args=args)


def read_order(stream: TextIO) -> int:
    """Read the polynomial order from the next non-blank line."""
    for line in iter(stream.readline, ''):
        if line.strip():
            token = line.split()[0]
            try:
                return int(token)
            except ValueError:
                raise ValidationError(
                    f"order: expected a non-negative integer, got {token!r}"
                ) from None
    raise ValidationError("order: no polynomial order given")


def run(options: argparse.Namespace, stdin: TextIO, stdout: TextIO) -> None:
    def say(*lines) -> None:
        if not options.quiet:
            for line in lines:
                print(line, file=stdout)

    say(
        "Enter one pair of X and Y values per line, the two separated by a space: ",
        "(Enter a blank line when you're done.): ",
    )
    data = parse_matrix(stdin)

    order = options.order
    if order is None:
        say("To what order polynomial should this data be fitted?")
        order = read_order(stdin)

    design = PolyfitDesign.from_matrix(data, order)
    V = design.vandermonde()
    Vt = V.transposed()

    say(
        "",
        "Here is your data: ",
        design.data(),
        "Here is your Vandermonde matrix: ",
        V,
        "Here is its transpose: ",
        Vt,
        "Here is VᵀV: ",
        Vt @ V,
    )

    solution = fit(design)

    say("Computed coefficients: ")
    print(solution.polynomial(), file=stdout)

    if options.summary:
        print("", file=stdout)
        print(solution.summary(), file=stdout)


def main(args=None, stdin: TextIO | None = None, stdout: TextIO | None = None,
         stderr: TextIO | None = None) -> int:
    options = _parse_args(args=args)
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr

    try:
        run(options, stdin, stdout)
    except DenseMatrixError as e:
        print(f"error: {e}", file=stderr)
        return 1
    return 0

"""
Least-squares polynomial fitting.

Fits y ≈ aₙxⁿ + … + a₁x + a₀ to (x, y) samples by solving the normal
equations with the densematrix library.

Public API:
    fit(x, y, order, ...) -> PolyfitSolution

Example:
    >>> from densematrix.polyfit import fit
    >>> result = fit([0, 1, 2, 3], [1, 2, 5, 10], order=2)
    >>> print(result.coefficients)
    >>> print(result.summary())
"""

from densematrix.polyfit.design import PolyfitDesign
from densematrix.polyfit.solution import PolyfitParams, PolyfitSolution, format_polynomial
from densematrix.polyfit.solvers import fit

__all__ = [
    "fit",
    "PolyfitDesign",
    "PolyfitSolution",
    "PolyfitParams",
    "format_polynomial",
]

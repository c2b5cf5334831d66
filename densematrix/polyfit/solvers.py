"""
Solver dispatch for polynomial fits.

This module provides the fit() function (public API) and backend selection.
"""

from typing import Literal

from numpy.typing import ArrayLike

from densematrix.polyfit.backends.gauss_jordan import GaussJordanBackend
from densematrix.polyfit.design import PolyfitDesign
from densematrix.polyfit.solution import PolyfitSolution


# Type alias for backend selection
BackendChoice = Literal['auto', 'gauss_jordan']


def fit(
    x: ArrayLike | PolyfitDesign,
    y: ArrayLike | None = None,
    order: int | None = None,
    *,
    backend: BackendChoice = 'auto',
) -> PolyfitSolution:
    """
    Fit a polynomial of the given order by least squares.

    Solves the normal equations:
        a = (VᵀV)⁻¹ Vᵀ y
    where V is the Vandermonde matrix with columns xⁿ … x¹ x⁰.

    This is the primary public API for polynomial fitting. All input
    validation, backend selection, and result wrapping happens here.

    Args:
        x: Sample abscissae, or a prebuilt PolyfitDesign (then y and
           order must be omitted)
        y: Sample ordinates, same length as x
        order: Polynomial degree; at least order + 1 samples are needed
        backend: Computational backend to use:
            - 'auto': Select the default (currently 'gauss_jordan')
            - 'gauss_jordan': Invert VᵀV by Gauss-Jordan elimination

    Returns:
        PolyfitSolution with coefficients (highest power first),
        diagnostics, and summary methods

    Raises:
        ValidationError: If inputs are invalid
        ShapeMismatchError: If x and y have inconsistent lengths
        SingularMatrixError: If VᵀV is singular (too few distinct x values)

    Example:
        >>> from densematrix.polyfit import fit
        >>> result = fit([0, 1, 2, 3], [1, 2, 5, 10], order=2)
        >>> print(result.polynomial())   # x^2 + 1, up to rounding
    """
    # === Construct Design ===
    # This is the boundary - validate here, trust everywhere else
    if isinstance(x, PolyfitDesign):
        if y is not None or order is not None:
            raise ValueError("y and order must be omitted when passing a PolyfitDesign")
        design = x
    else:
        if y is None:
            raise ValueError("y required when x is not a PolyfitDesign")
        if order is None:
            raise ValueError("order required when x is not a PolyfitDesign")
        design = PolyfitDesign.from_arrays(x, y, order)

    # === Select Backend ===
    backend_impl = _get_backend(backend)

    # === Solve ===
    result = backend_impl.solve(design)

    # === Wrap and Return ===
    return PolyfitSolution(_result=result, _design=design)


def _get_backend(choice: BackendChoice):
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValueError: If unknown backend specified
    """
    if choice in ('auto', 'gauss_jordan'):
        return GaussJordanBackend()

    raise ValueError(f"Unknown backend: {choice!r}")

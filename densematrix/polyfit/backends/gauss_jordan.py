"""
Normal-equation backend for polynomial fits.

Solves the least-squares problem min_a ||y - Va|| through the normal
equations, a = (VᵀV)⁻¹ Vᵀ y, entirely with densematrix: V is built
cell by cell, products use matrix multiplication, and (VᵀV)⁻¹ comes from
Gauss-Jordan elimination.
"""

import warnings
from typing import Any

import numpy as np

from densematrix.core.compute.timing import timed
from densematrix.core.result import Result
from densematrix.matrix import inverse
from densematrix.polyfit.design import PolyfitDesign
from densematrix.polyfit.solution import PolyfitParams


class GaussJordanBackend:
    """
    Backend inverting the normal matrix by Gauss-Jordan elimination.

    Warnings raised while solving (a ZeroPivotWarning from the inverse,
    for instance) are re-issued to the caller and also recorded in
    Result.warnings.
    """

    @property
    def name(self) -> str:
        return 'gauss_jordan'

    def solve(self, design: PolyfitDesign) -> Result[PolyfitParams]:
        """
        Solve the normal equations.

        Algorithm:
            1. Build the Vandermonde matrix V and the response column y
            2. Form VᵀV and invert it
            3. a = (VᵀV)⁻¹ Vᵀ y
            4. Compute fitted values, residuals and sums of squares

        Args:
            design: Validated polyfit design

        Returns:
            Result containing PolyfitParams

        Raises:
            SingularMatrixError: If VᵀV is singular (e.g. too few distinct x)
        """
        with timed() as timer, warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter('always')

            with timer.section('vandermonde'):
                V = design.vandermonde()
                y = design.response()
                Vt = V.transposed()

            with timer.section('normal_matrix'):
                VtV = Vt @ V
                determinant = VtV.determinant()

            with timer.section('inverse'):
                VtV_inv = inverse(VtV, name="VᵀV", determinant=determinant)

            with timer.section('coefficients'):
                answer = VtV_inv @ Vt @ y
                coefficients = answer.to_numpy().ravel()

            with timer.section('statistics'):
                fitted_values = (V @ answer).to_numpy().ravel()
                residuals = design.y - fitted_values
                rss = float(residuals @ residuals)
                tss = float(np.sum((design.y - np.mean(design.y)) ** 2))

        for warning in caught:
            warnings.warn_explicit(
                warning.message, warning.category, warning.filename, warning.lineno
            )

        params = PolyfitParams(
            coefficients=coefficients,
            normal_inverse=VtV_inv.to_numpy(),
            residuals=residuals,
            fitted_values=fitted_values,
            rss=rss,
            tss=tss,
            df_residual=design.n - design.p,
        )

        info: dict[str, Any] = {
            'method': 'normal_equations',
            'order': design.order,
            'n': design.n,
            'determinant': determinant,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(str(w.message) for w in caught),
        )

"""
Polynomial fit solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import stats

from densematrix.core.result import Result
from densematrix.core.validation import check_array
from densematrix.matrix import Matrix

if TYPE_CHECKING:
    from densematrix.polyfit.design import PolyfitDesign


@dataclass(frozen=True)
class PolyfitParams:
    """
    Parameter payload for a polynomial fit.

    This is the immutable data computed by backends. Coefficients are
    ordered from the highest power down to the constant term, matching
    the columns of the Vandermonde matrix.
    """
    coefficients: NDArray[np.floating[Any]]
    normal_inverse: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    fitted_values: NDArray[np.floating[Any]]
    rss: float
    tss: float
    df_residual: int


def format_polynomial(coefficients: ArrayLike) -> str:
    """
    Render coefficients (highest power first) as 'a x^2 + b x + c'.

    Every term is printed, including zero ones, so the output always has
    order + 1 terms: aₙx^n + … + a₁x + a₀.
    """
    coefficients = np.asarray(coefficients, dtype=np.float64)
    order = coefficients.shape[0] - 1
    terms = []
    for i, a in enumerate(coefficients.tolist()):
        power = order - i
        if power == 0:
            terms.append(f"{a:g}")
        elif power == 1:
            terms.append(f"{a:g}x")
        else:
            terms.append(f"{a:g}x^{power}")
    return " + ".join(terms)


@dataclass
class PolyfitSolution:
    """
    User-facing polynomial fit results.

    Wraps the backend Result and provides convenient accessors for the
    coefficients, goodness of fit and coefficient inference.
    """
    _result: Result[PolyfitParams]
    _design: 'PolyfitDesign'

    # Cached computations
    _standard_errors: NDArray[np.floating[Any]] | None = None

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """aₙ … a₁ a₀, highest power first."""
        return self._result.params.coefficients

    @property
    def coefficient_matrix(self) -> Matrix:
        """Coefficients as an (order + 1) x 1 column matrix."""
        return Matrix.column(self.coefficients)

    @property
    def order(self) -> int:
        return self._design.order

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values

    @property
    def rss(self) -> float:
        return self._result.params.rss

    @property
    def tss(self) -> float:
        return self._result.params.tss

    @property
    def df_residual(self) -> int:
        return self._result.params.df_residual

    @property
    def r_squared(self) -> float:
        if self.tss == 0:
            return 1.0 if self.rss == 0 else 0.0
        return 1.0 - (self.rss / self.tss)

    @property
    def residual_std_error(self) -> float:
        df = self.df_residual
        if df <= 0:
            return 0.0
        return float(np.sqrt(self.rss / df))

    @property
    def standard_errors(self) -> NDArray[np.floating[Any]]:
        """
        Standard errors of the coefficients.

        Computed as SE(a) = sqrt(diag(σ² (VᵀV)⁻¹)) with σ² = RSS / (n - p).
        An exact fit (n == p) leaves no residual degrees of freedom and
        gives NaN.
        """
        if self._standard_errors is not None:
            return self._standard_errors

        p = len(self.coefficients)
        df = self.df_residual
        if df <= 0:
            self._standard_errors = np.full(p, np.nan, dtype=np.float64)
            return self._standard_errors

        sigma_sq = self.rss / df
        variances = sigma_sq * np.diag(self._result.params.normal_inverse)
        with np.errstate(invalid='ignore'):
            self._standard_errors = np.sqrt(variances)
        return self._standard_errors

    @property
    def t_statistics(self) -> NDArray[np.floating[Any]]:
        se = self.standard_errors
        with np.errstate(divide='ignore', invalid='ignore'):
            t = self.coefficients / se
        return np.where(np.isfinite(t), t, np.nan)

    @property
    def p_values(self) -> NDArray[np.floating[Any]]:
        """Two-sided p-values from Student's t with n - p degrees of freedom."""
        df = self.df_residual
        if df <= 0:
            return np.full(len(self.coefficients), np.nan, dtype=np.float64)
        return 2.0 * stats.t.sf(np.abs(self.t_statistics), df)

    def predict(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        """Evaluate the fitted polynomial at x."""
        x_arr = check_array(x, 'x')
        return np.polyval(self.coefficients, x_arr)

    def polynomial(self) -> str:
        """The fitted polynomial as 'aₙx^n + … + a₁x + a₀'."""
        return format_polynomial(self.coefficients)

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Generate a coefficient table in the style of R's summary.lm."""
        lines = [
            "Polynomial Fit Results",
            "=" * 60,
            f"Observations: {self._design.n}",
            f"Order: {self.order}",
            f"R-squared: {self.r_squared:.6f}",
            f"Residual Std. Error: {self.residual_std_error:.6f} on {self.df_residual} DF",
            "",
            "Coefficients:",
            "-" * 60,
            f"{'Term':<8} {'Estimate':>14} {'Std.Error':>12} {'t value':>10} {'Pr(>|t|)':>10}",
            "-" * 60,
        ]

        for i, (coef, se, t, pv) in enumerate(zip(
            self.coefficients, self.standard_errors, self.t_statistics, self.p_values
        )):
            power = self.order - i
            term = "1" if power == 0 else ("x" if power == 1 else f"x^{power}")
            se_str = f"{se:12.6f}" if not np.isnan(se) else "          NA"
            t_str = f"{t:10.3f}" if not np.isnan(t) else "        NA"
            p_str = f"{pv:10.4g}" if not np.isnan(pv) else "        NA"
            lines.append(f"{term:<8} {coef:14.6f} {se_str} {t_str} {p_str}")

        lines.append("-" * 60)
        lines.append(f"Polynomial: {self.polynomial()}")
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        for warning in self.warnings:
            lines.append(f"Warning: {warning}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"PolyfitSolution(n={self._design.n}, order={self.order}, "
            f"r_squared={self.r_squared:.4f})"
        )

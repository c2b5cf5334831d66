"""
Tests for densematrix exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via DenseMatrixError)
    - Builtin compatibility (OutOfRangeError is an IndexError,
      AddressError is a ValueError)
    - Diagnostic attributes on SingularMatrixError, NonSquareError,
      AddressError
    - ZeroPivotWarning is a RuntimeWarning
"""

import pytest

from densematrix.core.exceptions import (
    AddressError,
    DenseMatrixError,
    NonSquareError,
    NumericalError,
    OutOfRangeError,
    ShapeMismatchError,
    SingularMatrixError,
    ValidationError,
    ZeroPivotWarning,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via DenseMatrixError."""

    @pytest.mark.parametrize("cls", [
        ValidationError,
        ShapeMismatchError,
        NonSquareError,
        OutOfRangeError,
        AddressError,
        NumericalError,
        SingularMatrixError,
    ])
    def test_is_densematrix_error(self, cls):
        with pytest.raises(DenseMatrixError):
            raise cls("boom")

    def test_shape_mismatch_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise ShapeMismatchError("ragged")

    def test_singular_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_singular_is_not_validation_error(self):
        err = SingularMatrixError("singular")
        assert not isinstance(err, ValidationError)

    def test_out_of_range_is_index_error(self):
        with pytest.raises(IndexError):
            raise OutOfRangeError("cell (4, 1) is outside the 3x3 matrix")

    def test_address_error_is_value_error(self):
        with pytest.raises(ValueError):
            raise AddressError("address format incorrect: 'X1'")

    def test_zero_pivot_warning_is_runtime_warning(self):
        assert issubclass(ZeroPivotWarning, RuntimeWarning)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestAttributes:
    """Errors carry the values that caused them."""

    def test_singular_all_attributes(self):
        err = SingularMatrixError("VᵀV is singular", matrix_name="VᵀV", determinant=0.0)
        assert str(err) == "VᵀV is singular"
        assert err.matrix_name == "VᵀV"
        assert err.determinant == 0.0

    def test_singular_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.determinant is None

    def test_nonsquare_shape(self):
        err = NonSquareError("nonsquare", shape=(2, 3))
        assert err.shape == (2, 3)

    def test_nonsquare_shape_default(self):
        assert NonSquareError("nonsquare").shape is None

    def test_address_error_keeps_address(self):
        with pytest.raises(AddressError) as exc_info:
            raise AddressError("bad", address="Q7")
        assert exc_info.value.address == "Q7"

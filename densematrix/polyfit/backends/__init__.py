"""
Polyfit backends.

Available backends:
    GaussJordanBackend: normal equations with a Gauss-Jordan inverse
"""

from densematrix.polyfit.backends.gauss_jordan import GaussJordanBackend

__all__ = [
    "GaussJordanBackend",
]

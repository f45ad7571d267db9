"""Scoring spline fits against the functions they interpolate.

max_error
    Max-norm error of a spline at the cell midpoints of [0, 1].
compare_boundary_conditions
    Fit one function under several boundary conditions and score each.
"""

from ._compare_boundary_conditions import compare_boundary_conditions
from ._max_error import max_error
from ._spline_comparison import BoundaryFit, SplineComparison

__all__ = [
    "BoundaryFit",
    "SplineComparison",
    "compare_boundary_conditions",
    "max_error",
]

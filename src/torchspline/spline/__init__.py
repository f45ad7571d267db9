"""Cubic spline fitting on PyTorch tensors.

The spline is described by its moments, the second derivatives at the
knots, obtained from one tridiagonal solve.

Cubic Splines
-------------
cubic_spline
    Create a cubic spline interpolator from data (fit + callable).
cubic_spline_fit
    Fit a cubic spline to data points.
cubic_spline_evaluate
    Evaluate a cubic spline at query points.
cubic_spline_derivative
    Evaluate the first, second or third derivative of a cubic spline.

Linear Algebra
--------------
solve_tridiagonal
    Thomas algorithm for tridiagonal systems.
locate_interval
    Segment lookup shared by evaluation and differentiation.

Data Types
----------
CubicSpline
    Moment representation of a fitted spline.
BoundaryCondition
    Equations closing the moment system at the endpoints.

Exceptions
----------
SplineError
    Base exception for spline operations.
KnotError
    Invalid grid passed to the fit.
TridiagonalError
    Inconsistent tridiagonal system.
"""

from ._boundary_condition import BoundaryCondition
from ._cubic_spline import (
    CubicSpline,
    cubic_spline,
    cubic_spline_derivative,
    cubic_spline_evaluate,
    cubic_spline_fit,
)
from ._knot_error import KnotError
from ._locate_interval import locate_interval
from ._solve_tridiagonal import solve_tridiagonal
from ._spline_error import SplineError
from ._tridiagonal_error import TridiagonalError

__all__ = [
    "BoundaryCondition",
    "CubicSpline",
    "KnotError",
    "SplineError",
    "TridiagonalError",
    "cubic_spline",
    "cubic_spline_derivative",
    "cubic_spline_evaluate",
    "cubic_spline_fit",
    "locate_interval",
    "solve_tridiagonal",
]

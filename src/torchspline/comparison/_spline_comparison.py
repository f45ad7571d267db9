from dataclasses import dataclass
from typing import Dict

from torch import Tensor

from torchspline.function import ParametrizedFunction
from torchspline.spline import BoundaryCondition, CubicSpline


@dataclass
class BoundaryFit:
    """Spline fitted under one boundary condition.

    Attributes
    ----------
    boundary : BoundaryCondition
        Condition the spline was closed with.
    spline : CubicSpline
        Fitted spline.
    x : Tensor
        Dense reference grid, shape (reference_points,).
    y : Tensor
        Spline evaluated on x.
    max_error : float
        Max-norm error against the analytic function at the reference
        cell midpoints.
    """

    boundary: BoundaryCondition
    spline: CubicSpline
    x: Tensor
    y: Tensor
    max_error: float


@dataclass
class SplineComparison:
    """Splines of one function under several boundary conditions.

    Attributes
    ----------
    function : ParametrizedFunction
        The analytic function.
    x : Tensor
        Fitting grid, shape (sample_points,).
    y : Tensor
        Function sampled on x.
    reference_x : Tensor
        Dense reference grid, shape (reference_points,).
    reference_y : Tensor
        Function sampled on reference_x.
    fits : Dict[BoundaryCondition, BoundaryFit]
        One fit per requested condition, in request order.
    """

    function: ParametrizedFunction
    x: Tensor
    y: Tensor
    reference_x: Tensor
    reference_y: Tensor
    fits: Dict[BoundaryCondition, BoundaryFit]

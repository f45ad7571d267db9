"""Cubic spline interpolation."""

from typing import Callable, Optional, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from .._boundary_condition import BoundaryCondition
from ._cubic_spline_evaluate import cubic_spline_evaluate
from ._cubic_spline_fit import cubic_spline_fit


@tensorclass
class CubicSpline:
    """Interpolating cubic spline stored through its moments.

    On segment i the spline is

        M[i+1]*(t-x[i])^3/(6h[i]) + M[i]*(x[i+1]-t)^3/(6h[i])
        + (y[i+1] - h[i]^2*M[i+1]/6)*(t-x[i])/h[i]
        + (y[i] - h[i]^2*M[i]/6)*(x[i+1]-t)/h[i]

    Instances are produced by :func:`cubic_spline_fit` and are not
    modified afterwards.

    Attributes
    ----------
    knots : Tensor
        Breakpoints x, shape (n,). Strictly increasing.
    knot_values : Tensor
        Values y at the knots, shape (n,).
    widths : Tensor
        Segment widths h, shape (n-1,).
    moments : Tensor
        Second derivative M of the spline at each knot, shape (n,).
    boundary_values : Tensor
        Endpoint values (f0, f1) the boundary condition was closed with,
        shape (2,). Zero for natural splines.
    boundary : str
        Boundary condition value: "second_derivative", "first_derivative"
        or "natural".
    uniform : bool
        Whether all segment widths are equal.
    """

    knots: Tensor
    knot_values: Tensor
    widths: Tensor
    moments: Tensor
    boundary_values: Tensor
    boundary: str
    uniform: bool


def cubic_spline(
    x: torch.Tensor,
    y: torch.Tensor,
    boundary: Union[BoundaryCondition, str] = BoundaryCondition.NATURAL,
    boundary_values: Optional[torch.Tensor] = None,
) -> Callable[[torch.Tensor], torch.Tensor]:
    """Create a cubic spline interpolator from data.

    This is a convenience function that fits a cubic spline and returns
    a callable that evaluates it.

    Parameters
    ----------
    x : Tensor
        Data x-coordinates. Must be strictly monotonically increasing.
    y : Tensor
        Data y-values, same length as x.
    boundary : BoundaryCondition or str, optional
        Boundary condition. Default is natural.
    boundary_values : Tensor, optional
        Endpoint derivatives (f0, f1); required unless the boundary is
        natural.

    Returns
    -------
    spline : Callable[[Tensor], Tensor]
        Function that evaluates the spline at given points.

    Examples
    --------
    >>> import torch
    >>> x = torch.linspace(0, 1, 10, dtype=torch.float64)
    >>> f = cubic_spline(x, torch.sin(x))
    >>> f(torch.tensor(0.5, dtype=torch.float64))
    """
    fitted = cubic_spline_fit(
        x, y, boundary=boundary, boundary_values=boundary_values
    )
    return lambda t: cubic_spline_evaluate(fitted, t)

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Union

import torch
from torch import Tensor

from .._boundary_condition import BoundaryCondition
from .._knot_error import KnotError
from .._solve_tridiagonal import solve_tridiagonal

if TYPE_CHECKING:
    from ._cubic_spline import CubicSpline

# Relative tolerance under which segment widths count as equal
_UNIFORM_RTOL = 1e-9


def cubic_spline_fit(
    x: Tensor,
    y: Tensor,
    boundary: Union[BoundaryCondition, str] = BoundaryCondition.NATURAL,
    boundary_values: Optional[Tensor] = None,
) -> CubicSpline:
    """
    Fit a cubic spline to data points.

    Solves the tridiagonal system for the moments (second derivatives at
    the knots). Interior rows enforce continuity of the first derivative:

        h[i-1]*M[i-1] + 2*(h[i-1]+h[i])*M[i] + h[i]*M[i+1]
            = 6*((y[i+1]-y[i])/h[i] - (y[i]-y[i-1])/h[i-1])

    and the first and last rows come from the boundary condition.

    Parameters
    ----------
    x : Tensor
        Knot positions, shape (n_points,). Must be strictly increasing.
    y : Tensor
        Values at knots, shape (n_points,).
    boundary : BoundaryCondition or str
        "second_derivative", "first_derivative" or "natural".
    boundary_values : Tensor, optional
        Endpoint values (f0, f1), shape (2,). First derivatives for
        "first_derivative", second derivatives for "second_derivative".
        Ignored for "natural", which always uses zeros.

    Returns
    -------
    CubicSpline
        Fitted spline.

    Raises
    ------
    KnotError
        If x and y are not one-dimensional tensors of equal length, have
        fewer than 3 points, or x is not strictly increasing.
    ValueError
        If the boundary condition is unknown, or boundary_values is missing
        or not of shape (2,) where it is required.
    """
    boundary = BoundaryCondition(boundary)

    if x.dim() != 1 or y.dim() != 1:
        raise KnotError(
            f"x and y must be one-dimensional, got shapes {tuple(x.shape)} "
            f"and {tuple(y.shape)}"
        )

    n = x.shape[0]

    if y.shape[0] != n:
        raise KnotError(
            f"x and y must have the same length, got {n} and {y.shape[0]}"
        )
    if n < 3:
        raise KnotError(f"Need at least 3 points, got {n}")
    if not torch.all(x[1:] > x[:-1]):
        raise KnotError("Knots must be strictly increasing")

    dtype = torch.promote_types(x.dtype, y.dtype)
    x = x.to(dtype)
    y = y.to(dtype)

    if boundary == BoundaryCondition.NATURAL:
        boundary_values = torch.zeros(2, dtype=dtype, device=y.device)
    elif boundary_values is None:
        raise ValueError(
            f"boundary_values required for {boundary.value} boundary"
        )
    else:
        boundary_values = torch.as_tensor(
            boundary_values, dtype=dtype, device=y.device
        )
        if boundary_values.shape != (2,):
            raise ValueError(
                f"boundary_values must have shape (2,), got "
                f"{tuple(boundary_values.shape)}"
            )

    f0 = boundary_values[0]
    f1 = boundary_values[1]

    h = x[1:] - x[:-1]  # (n-1,)
    delta = (y[1:] - y[:-1]) / h  # (n-1,)

    lower = torch.zeros(n, dtype=dtype, device=x.device)
    diag = torch.zeros(n, dtype=dtype, device=x.device)
    upper = torch.zeros(n, dtype=dtype, device=x.device)
    rhs = torch.zeros(n, dtype=dtype, device=y.device)

    # Interior equations
    lower[1:-1] = h[:-1]
    diag[1:-1] = 2 * (h[:-1] + h[1:])
    upper[1:-1] = h[1:]
    rhs[1:-1] = 6 * (delta[1:] - delta[:-1])

    if boundary == BoundaryCondition.FIRST_DERIVATIVE:
        # S'(x[0]) = f0, S'(x[n-1]) = f1
        diag[0] = 2 * h[0]
        upper[0] = h[0]
        rhs[0] = 6 * (delta[0] - f0)

        lower[-1] = h[-1]
        diag[-1] = 2 * h[-1]
        rhs[-1] = 6 * (f1 - delta[-1])
    else:
        # M[0] = f0, M[n-1] = f1; natural has f0 = f1 = 0
        diag[0] = 1
        upper[0] = 0
        rhs[0] = f0

        lower[-1] = 0
        diag[-1] = 1
        rhs[-1] = f1

    moments = solve_tridiagonal(lower, diag, upper, rhs)

    uniform = bool(
        torch.allclose(h, h[0].expand_as(h), rtol=_UNIFORM_RTOL, atol=0.0)
    )

    # Lazy import to avoid circular dependency
    from ._cubic_spline import CubicSpline

    return CubicSpline(
        knots=x,
        knot_values=y,
        widths=h,
        moments=moments,
        boundary_values=boundary_values,
        boundary=boundary.value,
        uniform=uniform,
        batch_size=[],
    )

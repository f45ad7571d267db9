from __future__ import annotations

from typing import TYPE_CHECKING, Union

import torch
from torch import Tensor

from .._locate_interval import locate_interval

if TYPE_CHECKING:
    from ._cubic_spline import CubicSpline


def cubic_spline_derivative(
    spline: CubicSpline,
    t: Union[Tensor, float],
    order: int = 1,
) -> Tensor:
    """
    Evaluate a derivative of a cubic spline at query points.

    Parameters
    ----------
    spline : CubicSpline
        Fitted cubic spline
    t : Tensor or float
        Query points, shape (*query_shape) or scalar
    order : int
        Order of derivative (1, 2, or 3). Default is 1.

    Returns
    -------
    Tensor
        Derivative values, shape (*query_shape)

    Raises
    ------
    ValueError
        If order is not 1, 2, or 3.

    Notes
    -----
    With l = t - x[i], r = x[i+1] - t on segment i:

    - First derivative: M[i+1]*l^2/(2h) - M[i]*r^2/(2h)
      + (y[i+1]-y[i])/h - h*(M[i+1]-M[i])/6
    - Second derivative: M[i+1]*l/h + M[i]*r/h
    - Third derivative: (M[i+1]-M[i])/h
    """
    if order < 1 or order > 3:
        raise ValueError(f"Derivative order must be 1, 2, or 3, got {order}")

    knots = spline.knots
    knot_values = spline.knot_values
    widths = spline.widths
    moments = spline.moments

    t = torch.as_tensor(t, dtype=knots.dtype, device=knots.device)

    is_scalar = t.dim() == 0
    if is_scalar:
        t = t.unsqueeze(0)

    query_shape = t.shape
    t_flat = t.reshape(-1)

    i = locate_interval(knots, widths, t_flat, spline.uniform)

    h = widths[i]
    left = t_flat - knots[i]
    right = knots[i + 1] - t_flat
    m_lo = moments[i]
    m_hi = moments[i + 1]

    if order == 1:
        y = (
            m_hi * left**2 / (2 * h)
            - m_lo * right**2 / (2 * h)
            + (knot_values[i + 1] - knot_values[i]) / h
            - h * (m_hi - m_lo) / 6
        )
    elif order == 2:
        y = m_hi * left / h + m_lo * right / h
    else:
        y = (m_hi - m_lo) / h

    y = y.view(*query_shape)

    if is_scalar:
        y = y.squeeze(0)

    return y

from __future__ import annotations

from typing import TYPE_CHECKING, Union

import torch
from torch import Tensor

from .._locate_interval import locate_interval

if TYPE_CHECKING:
    from ._cubic_spline import CubicSpline


def cubic_spline_evaluate(
    spline: CubicSpline,
    t: Union[Tensor, float],
) -> Tensor:
    """
    Evaluate a cubic spline at query points.

    Each query is evaluated independently, so the output keeps the order
    and shape of ``t``. Queries outside ``[knots[0], knots[-1]]`` are
    evaluated with the nearest boundary segment's cubic.

    Parameters
    ----------
    spline : CubicSpline
        Fitted cubic spline from cubic_spline_fit
    t : Tensor or float
        Query points, shape (*query_shape) or scalar

    Returns
    -------
    y : Tensor
        Interpolated values, shape (*query_shape)
    """
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

    y = (
        m_hi * left**3 / (6 * h)
        + m_lo * right**3 / (6 * h)
        + (knot_values[i + 1] - h * h * m_hi / 6) * left / h
        + (knot_values[i] - h * h * m_lo / 6) * right / h
    )

    y = y.view(*query_shape)

    if is_scalar:
        y = y.squeeze(0)

    return y

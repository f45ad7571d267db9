from typing import Callable

from torch import Tensor

from torchspline.function import midpoints
from torchspline.spline import CubicSpline, cubic_spline_evaluate


def max_error(
    function: Callable[[Tensor], Tensor],
    spline: CubicSpline,
    n: int,
) -> float:
    """
    Max-norm distance between a function and its spline.

    [0, 1] is split into n - 1 equal cells and both are compared at the
    cell midpoints, away from the knots where the error is trivially zero.

    Parameters
    ----------
    function : Callable[[Tensor], Tensor]
        Analytic function the spline was fitted to.
    spline : CubicSpline
        Fitted spline.
    n : int
        Number of cell boundaries, >= 2.

    Returns
    -------
    float
        ``max |function(mid) - spline(mid)|``. NaN if any deviation is NaN.
    """
    t = midpoints(n, dtype=spline.knots.dtype)

    deviation = (function(t) - cubic_spline_evaluate(spline, t)).abs()

    # torch.max propagates NaN
    return deviation.max().item()

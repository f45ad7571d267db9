import math
import operator
from typing import Iterable, Union

from torchspline.function import FunctionFamily, resolve, sample
from torchspline.spline import (
    BoundaryCondition,
    cubic_spline_evaluate,
    cubic_spline_fit,
)

from ._max_error import max_error
from ._spline_comparison import BoundaryFit, SplineComparison


def compare_boundary_conditions(
    function: Union[FunctionFamily, str],
    epsilon: float,
    sample_points: int,
    boundary_conditions: Iterable[Union[BoundaryCondition, str]] = tuple(
        BoundaryCondition
    ),
    reference_points: int = 1001,
) -> SplineComparison:
    """
    Fit one function under several boundary conditions and score each fit.

    The function is sampled once on a uniform grid of ``sample_points``
    points; every requested condition reuses that grid together with the
    matching analytic boundary pair (first derivatives for
    ``FIRST_DERIVATIVE``, second derivatives otherwise). Each spline is
    evaluated on a dense grid of ``reference_points`` points and scored
    with :func:`max_error` over the midpoints of that grid.

    Parameters
    ----------
    function : FunctionFamily or str
        Function family. Unknown names fall back to "first" with a warning.
    epsilon : float
        Shape parameter, finite and > 0.
    sample_points : int
        Number of fitting knots, >= 3.
    boundary_conditions : iterable of BoundaryCondition or str, optional
        Conditions to compare. Default is all three. Repeats are fitted
        once.
    reference_points : int, optional
        Size of the dense reference grid, >= 2. Default is 1001.

    Returns
    -------
    SplineComparison
        Sampled function and one BoundaryFit per condition.

    Raises
    ------
    ValueError
        If any argument is invalid. All arguments are checked before any
        spline is fitted.

    Examples
    --------
    >>> result = compare_boundary_conditions("delta", 0.1, 11, ["natural"])
    >>> result.fits[BoundaryCondition.NATURAL].max_error
    """
    sample_points = _count(sample_points, "sample_points", 3)
    reference_points = _count(reference_points, "reference_points", 2)
    if not math.isfinite(epsilon) or epsilon <= 0:
        raise ValueError(f"epsilon must be finite and positive, got {epsilon}")

    conditions = list(
        dict.fromkeys(BoundaryCondition(b) for b in boundary_conditions)
    )
    if not conditions:
        raise ValueError("At least one boundary condition is required")

    analytic = resolve(function, epsilon)

    x, y = sample(analytic, sample_points)
    reference_x, reference_y = sample(analytic, reference_points)

    fits = {}
    for boundary in conditions:
        spline = cubic_spline_fit(
            x,
            y,
            boundary=boundary,
            boundary_values=analytic.boundary_values(boundary),
        )
        fits[boundary] = BoundaryFit(
            boundary=boundary,
            spline=spline,
            x=reference_x,
            y=cubic_spline_evaluate(spline, reference_x),
            max_error=max_error(analytic, spline, reference_points),
        )

    return SplineComparison(
        function=analytic,
        x=x,
        y=y,
        reference_x=reference_x,
        reference_y=reference_y,
        fits=fits,
    )


def _count(value, name: str, minimum: int) -> int:
    # Any integer type (e.g. numpy.int64) is accepted; bool and float are not
    message = f"{name} must be an integer >= {minimum}, got {value!r}"

    if isinstance(value, bool):
        raise ValueError(message)
    try:
        value = operator.index(value)
    except TypeError:
        raise ValueError(message) from None
    if value < minimum:
        raise ValueError(message)

    return value

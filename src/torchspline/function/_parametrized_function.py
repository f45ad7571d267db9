from __future__ import annotations

import math
import warnings
from dataclasses import dataclass
from typing import Callable, Dict, NamedTuple, Union

from torch import Tensor

from torchspline.spline import BoundaryCondition

from ._custom import custom, custom_boundary_derivative
from ._delta import delta, delta_boundary_derivative
from ._first import first, first_boundary_derivative
from ._function_family import FunctionFamily
from ._second import second, second_boundary_derivative
from ._smooth import smooth, smooth_boundary_derivative


class _Family(NamedTuple):
    function: Callable[[Tensor, float], Tensor]
    boundary_derivative: Callable[[float, int], Tensor]


_FAMILIES: Dict[FunctionFamily, _Family] = {
    FunctionFamily.FIRST: _Family(first, first_boundary_derivative),
    FunctionFamily.SECOND: _Family(second, second_boundary_derivative),
    FunctionFamily.DELTA: _Family(delta, delta_boundary_derivative),
    FunctionFamily.SMOOTH: _Family(smooth, smooth_boundary_derivative),
    FunctionFamily.CUSTOM: _Family(custom, custom_boundary_derivative),
}


@dataclass(frozen=True, eq=False)
class ParametrizedFunction:
    """A function family bound to a shape parameter.

    Attributes
    ----------
    family : FunctionFamily
        Which function this is.
    epsilon : float
        Shape parameter, > 0.
    first_derivative : Tensor
        First derivative at x = 0 and x = 1, shape (2,).
    second_derivative : Tensor
        Second derivative at x = 0 and x = 1, shape (2,).
    """

    family: FunctionFamily
    epsilon: float
    first_derivative: Tensor
    second_derivative: Tensor

    def __call__(self, x: Tensor) -> Tensor:
        return _FAMILIES[self.family].function(x, self.epsilon)

    def boundary_values(
        self, boundary: Union[BoundaryCondition, str]
    ) -> Tensor:
        """Endpoint pair matching the kind of boundary condition.

        First derivatives for ``FIRST_DERIVATIVE``, second derivatives for
        ``SECOND_DERIVATIVE`` and ``NATURAL``.
        """
        if BoundaryCondition(boundary) == BoundaryCondition.FIRST_DERIVATIVE:
            return self.first_derivative
        return self.second_derivative


def resolve(
    name: Union[FunctionFamily, str],
    epsilon: float,
) -> ParametrizedFunction:
    """
    Look up a function family and bind it to epsilon.

    Parameters
    ----------
    name : FunctionFamily or str
        Family name: "first", "second", "delta", "smooth" or "custom".
        Unknown names fall back to "first" with a RuntimeWarning.
    epsilon : float
        Shape parameter, finite and > 0.

    Returns
    -------
    ParametrizedFunction
        Evaluator with its first- and second-derivative boundary pairs.

    Raises
    ------
    ValueError
        If epsilon is not finite and positive.
    """
    if not math.isfinite(epsilon) or epsilon <= 0:
        raise ValueError(f"epsilon must be finite and positive, got {epsilon}")

    try:
        family = FunctionFamily(name)
    except ValueError:
        warnings.warn(
            f"Unknown function family {name!r}, falling back to "
            f"{FunctionFamily.FIRST.value!r}",
            RuntimeWarning,
            stacklevel=2,
        )
        family = FunctionFamily.FIRST

    entry = _FAMILIES[family]

    return ParametrizedFunction(
        family=family,
        epsilon=float(epsilon),
        first_derivative=entry.boundary_derivative(epsilon, 1),
        second_derivative=entry.boundary_derivative(epsilon, 2),
    )

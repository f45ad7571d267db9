"""Parametrized test functions on [0, 1] and their boundary derivatives.

Each family ``f`` comes with ``f(x, epsilon)`` and
``f_boundary_derivative(epsilon, order)``, the latter returning the first
(``order=1``) or second (``order=2``) derivative at x = 0 and x = 1.

Families
--------
first
    Exponential ramp, f(0) = 0 and f(1) = 1.
second
    Symmetric boundary-layer profile.
delta
    Rational bump peaking at x = 0.5.
smooth
    Antisymmetric smoothstep around x = 0.5.
custom
    Sigmoid with a rational-cubic correction; fitted boundary derivatives.

Lookup
------
resolve
    Bind a family name and epsilon into a ParametrizedFunction.

Sampling
--------
sample
    Evaluate a function on a uniform grid over [0, 1].
midpoints
    Cell midpoints of a uniform partition of [0, 1].
"""

from ._custom import custom, custom_boundary_derivative
from ._delta import delta, delta_boundary_derivative
from ._first import first, first_boundary_derivative
from ._function_family import FunctionFamily
from ._parametrized_function import ParametrizedFunction, resolve
from ._sample import midpoints, sample
from ._second import second, second_boundary_derivative
from ._smooth import smooth, smooth_boundary_derivative

__all__ = [
    "FunctionFamily",
    "ParametrizedFunction",
    "custom",
    "custom_boundary_derivative",
    "delta",
    "delta_boundary_derivative",
    "first",
    "first_boundary_derivative",
    "midpoints",
    "resolve",
    "sample",
    "second",
    "second_boundary_derivative",
    "smooth",
    "smooth_boundary_derivative",
]

"""Hypothesis strategies for spline testing."""

from ._epsilons import epsilons
from ._grids import grids

__all__ = [
    "epsilons",
    "grids",
]

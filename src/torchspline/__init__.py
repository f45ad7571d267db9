"""torchspline: cubic spline fits of parametrized regularization functions."""

from . import (
    comparison,
    function,
    spline,
)

__all__ = [
    "comparison",
    "function",
    "spline",
]

__version__ = "0.1.0"

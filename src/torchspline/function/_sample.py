from typing import Callable, Tuple

import torch
from torch import Tensor


def sample(
    function: Callable[[Tensor], Tensor],
    n: int,
    dtype: torch.dtype = torch.float64,
) -> Tuple[Tensor, Tensor]:
    """
    Evaluate a function on a uniform grid over [0, 1].

    Parameters
    ----------
    function : Callable[[Tensor], Tensor]
        Element-wise function of x.
    n : int
        Number of grid points, >= 2.
    dtype : torch.dtype
        Grid dtype. Default is float64.

    Returns
    -------
    x : Tensor
        Grid, shape (n,), x[0] = 0 and x[-1] = 1.
    y : Tensor
        function(x), shape (n,).
    """
    if n < 2:
        raise ValueError(f"Need at least 2 sample points, got {n}")

    x = torch.linspace(0.0, 1.0, n, dtype=dtype)

    return x, function(x)


def midpoints(n: int, dtype: torch.dtype = torch.float64) -> Tensor:
    """Midpoints of the n - 1 equal cells partitioning [0, 1]."""
    if n < 2:
        raise ValueError(f"Need at least 2 points to form a cell, got {n}")

    return (torch.arange(n - 1, dtype=dtype) + 0.5) / (n - 1)

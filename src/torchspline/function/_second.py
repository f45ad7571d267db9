import math

import torch
from torch import Tensor


def second(x: Tensor, epsilon: float) -> Tensor:
    r"""
    Symmetric boundary-layer profile.

    .. math::

        f(x) = 1 - \frac{e^{-x/\sqrt{\varepsilon}} + e^{(x-1)/\sqrt{\varepsilon}}}
                        {1 + e^{-1/\sqrt{\varepsilon}}}

    Vanishes at both ends and approaches 1 in the interior as epsilon
    shrinks.
    """
    inverse_root = 1 / math.sqrt(epsilon)
    return 1 - (
        torch.exp(-x * inverse_root) + torch.exp((x - 1) * inverse_root)
    ) / (1 + math.exp(-inverse_root))


def second_boundary_derivative(epsilon: float, order: int = 1) -> Tensor:
    """Derivative of :func:`second` at x = 0 and x = 1, as ``[f0, f1]``."""
    eps = torch.as_tensor(epsilon, dtype=torch.float64)

    if order == 1:
        root = 1 / torch.sqrt(eps)
        f0 = torch.tanh(0.5 * root) * root
        f1 = -f0
    elif order == 2:
        f0 = -1 / eps
        f1 = -1 / eps
    else:
        raise ValueError(f"Derivative order must be 1 or 2, got {order}")

    return torch.stack([f0, f1])

import torch
from torch import Tensor


def delta(x: Tensor, epsilon: float) -> Tensor:
    r"""
    Rational bump peaking at x = 0.5.

    .. math::

        f(x) = \frac{\varepsilon}{\varepsilon + (2x - 1)^2}

    A regularization of the Dirac delta; ``f(0.5) = 1`` for every epsilon.
    """
    return epsilon / (epsilon + (2 * x - 1) ** 2)


def delta_boundary_derivative(epsilon: float, order: int = 1) -> Tensor:
    """Derivative of :func:`delta` at x = 0 and x = 1, as ``[f0, f1]``."""
    eps = torch.as_tensor(epsilon, dtype=torch.float64)

    if order == 1:
        f0 = 4 * eps / (eps + 1) ** 2
        f1 = -f0
    elif order == 2:
        f0 = -8 * eps * (eps - 3) / (eps + 1) ** 3
        f1 = f0
    else:
        raise ValueError(f"Derivative order must be 1 or 2, got {order}")

    return torch.stack([f0, f1])

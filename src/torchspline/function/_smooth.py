import torch
from torch import Tensor


def smooth(x: Tensor, epsilon: float) -> Tensor:
    r"""
    Antisymmetric smoothstep around x = 0.5.

    For :math:`x \le 1/2`, with :math:`v = e^{(2x-1)/\varepsilon}`,

    .. math::

        f(x) = -\frac{2(v - 1)}{3(v + 1)}

    and the mirror image :math:`f(x) = -f(1 - x)` for :math:`x > 1/2`.

    Both branches are written in terms of ``exp(-|2x - 1| / epsilon)``,
    which never exceeds 1, so neither side overflows for small epsilon.
    """
    decay = torch.exp(-torch.abs(2 * x - 1) / epsilon)
    magnitude = 2 * (1 - decay) / (3 * (1 + decay))
    return torch.where(x <= 0.5, magnitude, -magnitude)


def smooth_boundary_derivative(epsilon: float, order: int = 1) -> Tensor:
    """
    Derivative of :func:`smooth` at x = 0 and x = 1, as ``[f0, f1]``.

    The second-derivative pair is antisymmetric in spirit but the two
    endpoints have different closed forms, so each is computed on its own.
    """
    eps = torch.as_tensor(epsilon, dtype=torch.float64)

    if order == 1:
        f0 = -2 / (3 * eps * eps * (1 + torch.cosh(1 / eps)))
        f1 = -f0
    elif order == 2:
        shape = torch.tanh(1 / (2 * eps)) - 2 * eps
        f0 = -2 * shape / (3 * eps**4 * (torch.cosh(1 / eps) + 1))
        f1 = shape * (1 / torch.cosh(1 / (2 * eps))) ** 2 / (3 * eps**4)
    else:
        raise ValueError(f"Derivative order must be 1 or 2, got {order}")

    return torch.stack([f0, f1])

import torch
from torch import Tensor

# Below this epsilon e^(-1/epsilon) is dropped from the left second
# derivative, where it is lost against 1 anyway
_SMALL_EPSILON_THRESHOLD = 0.0625


def first(x: Tensor, epsilon: float) -> Tensor:
    r"""
    Exponential ramp.

    .. math::

        f(x) = \frac{1 - e^{-x/\varepsilon}}{1 - e^{-1/\varepsilon}}

    Both numerator and denominator go through ``expm1`` on tensors of the
    same shape, so ``f(0) = 0`` and ``f(1) = 1`` hold exactly.

    Parameters
    ----------
    x : Tensor
        Points in [0, 1].
    epsilon : float
        Positive shape parameter; the ramp steepens at x = 0 as it shrinks.

    Returns
    -------
    Tensor
        Function values, same shape as x.
    """
    return torch.expm1(-x / epsilon) / torch.expm1(
        -torch.ones_like(x) / epsilon
    )


def first_boundary_derivative(epsilon: float, order: int = 1) -> Tensor:
    """
    Derivative of :func:`first` at x = 0 and x = 1.

    Parameters
    ----------
    epsilon : float
        Positive shape parameter.
    order : int
        1 for the first derivative, 2 for the second.

    Returns
    -------
    Tensor
        ``[f0, f1]``, shape (2,), dtype float64.

    Raises
    ------
    ValueError
        If order is not 1 or 2.
    """
    eps = torch.as_tensor(epsilon, dtype=torch.float64)

    if order == 1:
        f1 = 1 / (torch.expm1(1 / eps) * eps)
        f0 = f1 + 1 / eps
    elif order == 2:
        ep = eps * eps
        f1 = 1 / (ep - ep * torch.exp(1 / eps))

        if epsilon >= _SMALL_EPSILON_THRESHOLD:
            dif = torch.exp(-1 / eps)
        else:
            dif = torch.zeros_like(eps)
        f0 = -1 / (ep * (1 - dif))
    else:
        raise ValueError(f"Derivative order must be 1 or 2, got {order}")

    return torch.stack([f0, f1])

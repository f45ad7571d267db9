import torch
from torch import Tensor

from ._tridiagonal_error import TridiagonalError


def solve_tridiagonal(
    lower: Tensor,
    diag: Tensor,
    upper: Tensor,
    rhs: Tensor,
) -> Tensor:
    """
    Solve a tridiagonal system Au = d using the Thomas algorithm.

    The matrix A has the form:
        [b0  c0   0   0  ...  0    0   ]
        [a1  b1  c1   0  ...  0    0   ]
        [ 0  a2  b2  c2  ...  0    0   ]
        [        ...                   ]
        [ 0   0   0   0  ... an-1 bn-1 ]

    Parameters
    ----------
    lower : Tensor
        Sub-diagonal ``a``, shape (n,). ``lower[0]`` is ignored.
    diag : Tensor
        Main diagonal ``b``, shape (n,)
    upper : Tensor
        Super-diagonal ``c``, shape (n,). ``upper[n-1]`` is ignored.
    rhs : Tensor
        Right-hand side ``d``, shape (*batch, n)

    Returns
    -------
    Tensor
        Solution u, shape (*batch, n)

    Raises
    ------
    TridiagonalError
        If a diagonal is not one-dimensional, rhs is a scalar, the four
        inputs disagree in length or the system has fewer than 2 rows.

    Notes
    -----
    The sweep uses the coefficients

        alpha[i] = -c[i] / (b[i] - alpha[i-1] * -a[i])
        beta[i] = (d[i] + beta[i-1] * -a[i]) / (b[i] - alpha[i-1] * -a[i])

    followed by ``u[i] = alpha[i] * u[i+1] + beta[i]``. Pivots are not
    checked; the caller supplies a diagonally dominant system. No tensor is
    written in place, so the solve is differentiable.
    """
    if lower.dim() != 1 or diag.dim() != 1 or upper.dim() != 1:
        raise TridiagonalError(
            f"Diagonals must be one-dimensional, got shapes "
            f"lower={tuple(lower.shape)}, diag={tuple(diag.shape)}, "
            f"upper={tuple(upper.shape)}"
        )
    if rhs.dim() == 0:
        raise TridiagonalError(
            "Right-hand side must have at least one dimension"
        )

    n = diag.shape[0]

    if lower.shape[0] != n or upper.shape[0] != n or rhs.shape[-1] != n:
        raise TridiagonalError(
            f"Diagonals and right-hand side must have the same length, got "
            f"lower={lower.shape[0]}, diag={n}, upper={upper.shape[0]}, "
            f"rhs={rhs.shape[-1]}"
        )
    if n < 2:
        raise TridiagonalError(f"Need at least 2 equations, got {n}")

    # rhs: (*batch, n) -> (n, *batch)
    rhs_t = rhs.movedim(-1, 0)

    alpha = [-upper[0] / diag[0]]
    beta = [rhs_t[0] / diag[0]]

    for i in range(1, n - 1):
        denom = diag[i] - alpha[i - 1] * -lower[i]
        alpha.append(-upper[i] / denom)
        beta.append((rhs_t[i] + beta[i - 1] * -lower[i]) / denom)

    u = [None] * n
    u[n - 1] = (rhs_t[n - 1] + beta[n - 2] * -lower[n - 1]) / (
        diag[n - 1] - alpha[n - 2] * -lower[n - 1]
    )

    for i in range(n - 2, -1, -1):
        u[i] = alpha[i] * u[i + 1] + beta[i]

    return torch.stack(u, dim=0).movedim(0, -1)

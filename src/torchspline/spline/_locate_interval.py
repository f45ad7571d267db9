import torch
from torch import Tensor


def locate_interval(
    knots: Tensor,
    widths: Tensor,
    t: Tensor,
    uniform: bool,
) -> Tensor:
    """
    Find the segment index i with knots[i] <= t < knots[i+1].

    Parameters
    ----------
    knots : Tensor
        Strictly increasing breakpoints, shape (n,)
    widths : Tensor
        Segment widths ``knots[1:] - knots[:-1]``, shape (n-1,)
    t : Tensor
        Flat query points, shape (m,)
    uniform : bool
        If True, all widths are equal and the index is computed directly
        as ``floor((t - knots[0]) / widths[0])``. Otherwise the knots are
        binary searched.

    Returns
    -------
    Tensor
        Segment indices, dtype long, shape (m,), clamped to [0, n-2].
        Queries left of the domain land in the first segment, queries
        right of it (and the last knot itself) in the last one.
    """
    n_segments = knots.shape[0] - 1

    if uniform:
        position = torch.nan_to_num((t - knots[0]) / widths[0], nan=0.0)
        index = torch.clamp(torch.floor(position), 0, n_segments - 1)
        return index.to(torch.long)

    index = torch.searchsorted(knots, t.contiguous(), right=True) - 1
    return torch.clamp(index, 0, n_segments - 1)

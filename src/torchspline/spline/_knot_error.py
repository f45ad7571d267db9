from ._spline_error import SplineError


class KnotError(SplineError):
    """Raised for invalid grids (shape mismatch, unsorted or too few knots)."""

    pass

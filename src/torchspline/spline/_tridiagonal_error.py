from ._spline_error import SplineError


class TridiagonalError(SplineError):
    """Raised for malformed tridiagonal systems (wrong rank or length)."""

    pass

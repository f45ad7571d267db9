"""Testing utilities for torchspline."""

from . import strategies

__all__ = ["strategies"]

import enum


class FunctionFamily(enum.Enum):
    """Parametrized regularization functions on [0, 1]."""

    FIRST = "first"
    SECOND = "second"
    DELTA = "delta"
    SMOOTH = "smooth"
    CUSTOM = "custom"

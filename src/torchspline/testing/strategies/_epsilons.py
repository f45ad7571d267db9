import hypothesis.strategies


def epsilons(
    min_value: float = 1e-3,
    max_value: float = 10.0,
) -> hypothesis.strategies.SearchStrategy[float]:
    """Strategy for function shape parameters."""
    return hypothesis.strategies.floats(
        min_value=min_value,
        max_value=max_value,
        allow_nan=False,
        allow_infinity=False,
    )

import enum


class BoundaryCondition(enum.Enum):
    """Pair of equations closing the moment system at the grid endpoints.

    Members
    -------
    SECOND_DERIVATIVE
        Pins the spline's second derivative (moment) at both ends to the
        supplied boundary values.
    FIRST_DERIVATIVE
        Clamps the spline's first derivative at both ends to the supplied
        boundary values.
    NATURAL
        ``SECOND_DERIVATIVE`` with both boundary values fixed at zero.

    Functions taking a boundary condition also accept the member's value,
    e.g. ``"natural"``.
    """

    SECOND_DERIVATIVE = "second_derivative"
    FIRST_DERIVATIVE = "first_derivative"
    NATURAL = "natural"

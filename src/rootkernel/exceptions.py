"""Exception hierarchy for Rootkernel.

Numeric failures (no real root, no convergence, degenerate coefficients) are
never raised; they are reported through ``None``, ``False`` or empty results.
The exceptions here cover malformed input and unsafe table requests only.
"""

from collections.abc import Sequence


class RootKernelError(Exception):
    """Base exception for all Rootkernel errors."""

    pass


class CoefficientError(RootKernelError):
    """Malformed coefficient input."""

    def __init__(self, coefficients: Sequence[float], reason: str) -> None:
        self.coefficients = list(coefficients)
        self.reason = reason
        super().__init__(f"Invalid coefficients {self.coefficients}: {reason}")


class OrderMismatchError(CoefficientError):
    """Coefficient count does not match a fixed Bezier order."""

    def __init__(self, coefficients: Sequence[float], order: int) -> None:
        self.order = order
        super().__init__(
            coefficients, f"expected {order} coefficients, got {len(coefficients)}"
        )


class PascalRowError(RootKernelError):
    """Requested Pascal row cannot be represented exactly in doubles."""

    def __init__(self, row: int, max_row: int) -> None:
        self.row = row
        self.max_row = max_row
        super().__init__(f"Pascal row {row} is outside the safe range 0..{max_row}")


class UnsupportedDegreeError(RootKernelError):
    """Solve request the facade cannot dispatch."""

    def __init__(self, degree: int, reason: str) -> None:
        self.degree = degree
        self.reason = reason
        super().__init__(f"Cannot solve degree {degree} polynomial: {reason}")

"""Pascal triangle rows and Bernstein basis values.

The table is built once at import time up to ``MAX_SAFE_ROW``. Binomial
coefficients beyond that row stop being exact in IEEE doubles, so requests
for them raise ``PascalRowError`` rather than returning inexact values.
"""

from rootkernel.exceptions import PascalRowError

MAX_SAFE_ROW = 60


def _build_rows(max_row: int) -> tuple[tuple[float, ...], ...]:
    rows: list[tuple[float, ...]] = [(1.0,)]
    for _ in range(max_row):
        previous = rows[-1]
        row = [1.0]
        for i in range(1, len(previous)):
            row.append(previous[i - 1] + previous[i])
        row.append(1.0)
        rows.append(tuple(row))
    return tuple(rows)


_ROWS = _build_rows(MAX_SAFE_ROW)


def get_row(row: int) -> tuple[float, ...]:
    """Return row ``row`` of Pascal's triangle (``row + 1`` entries).

    Raises:
        PascalRowError: If row is negative or beyond MAX_SAFE_ROW

    Examples:
        >>> get_row(4)
        (1.0, 4.0, 6.0, 4.0, 1.0)
    """
    if row < 0 or row > MAX_SAFE_ROW:
        raise PascalRowError(row, MAX_SAFE_ROW)
    return _ROWS[row]


def bezier_basis_values(order: int, u: float) -> list[float]:
    """Return the ``order`` Bernstein basis values of degree ``order - 1`` at u.

    Args:
        order: Number of basis functions (degree + 1)
        u: Parameter value

    Returns:
        List of basis values; they sum to 1 for any u.
    """
    if order <= 0:
        return []
    pascal = get_row(order - 1)
    v = 1.0 - u
    values = list(pascal)
    # u^i * v^(n-i), built with one forward and one backward running product
    power = 1.0
    for i in range(order):
        values[i] *= power
        power *= u
    power = 1.0
    for i in range(order - 1, -1, -1):
        values[i] *= power
        power *= v
    return values


def bezier_basis_derivatives(order: int, u: float) -> list[float]:
    """Return derivatives of the ``order`` Bernstein basis functions at u."""
    result = [0.0] * max(order, 0)
    if order < 2:
        return result
    degree = order - 1
    lower = bezier_basis_values(order - 1, u)
    # d/du B(i,n) = n * (B(i-1,n-1) - B(i,n-1))
    for i in range(order):
        left = lower[i - 1] if i > 0 else 0.0
        right = lower[i] if i < order - 1 else 0.0
        result[i] = degree * (left - right)
    return result

"""Utilities for polynomials in the standard power basis.

A coefficient sequence ``coffs`` represents ``coffs[0] + coffs[1]*x + coffs[2]*x^2 + ...``.
All functions are pure: inputs are never modified and new lists are returned.
"""

from collections.abc import Sequence


def degree_known_evaluate(coffs: Sequence[float], degree: int, x: float) -> float:
    """Evaluate with Horner's rule using only ``coffs[0..degree]``.

    Args:
        coffs: Power-basis coefficients (may be longer than degree + 1)
        degree: Degree to evaluate; negative degree evaluates to 0

    Returns:
        Polynomial value at x
    """
    if degree < 0:
        return 0.0
    p = coffs[degree]
    for i in range(degree - 1, -1, -1):
        p = x * p + coffs[i]
    return p


def evaluate(coffs: Sequence[float], x: float) -> float:
    """Evaluate the full-length polynomial at x.

    Examples:
        >>> evaluate([-2.0, 0.0, 1.0], 3.0)
        7.0
    """
    return degree_known_evaluate(coffs, len(coffs) - 1, x)


def evaluate_derivative(coffs: Sequence[float], x: float) -> float:
    """Evaluate the first derivative of the full-length polynomial at x."""
    degree = len(coffs) - 1
    if degree < 1:
        return 0.0
    p = degree * coffs[degree]
    for i in range(degree - 1, 0, -1):
        p = x * p + i * coffs[i]
    return p


def effective_degree(coffs: Sequence[float]) -> int:
    """Return the index of the last exactly-nonzero coefficient (-1 if all are zero)."""
    degree = len(coffs) - 1
    while degree >= 0 and coffs[degree] == 0.0:
        degree -= 1
    return degree


def accumulate(coffs_p: Sequence[float], coffs_q: Sequence[float], scale_q: float) -> list[float]:
    """Return ``P + scale_q * Q`` as a new list.

    The result has the length of the longer input, so Q may be longer than P.
    """
    n = max(len(coffs_p), len(coffs_q))
    result = [0.0] * n
    for i, a in enumerate(coffs_p):
        result[i] = a
    for i, b in enumerate(coffs_q):
        result[i] += scale_q * b
    return result


def zero(order: int) -> list[float]:
    """Return ``order`` zero coefficients."""
    return [0.0] * order


def add_constant(values: Sequence[float], a: float) -> list[float]:
    """Return a copy of ``values`` with ``a`` added to every entry."""
    return [v + a for v in values]


def compose_linear(coffs: Sequence[float], a: float, h: float) -> list[float]:
    """Return coefficients of ``g(s) = f(a + h*s)``.

    Used to map an interval ``[a, a + h]`` of x onto ``[0, 1]`` of s.

    Examples:
        >>> compose_linear([0.0, 0.0, 1.0], 1.0, 2.0)
        [1.0, 4.0, 4.0]
    """
    result: list[float] = []
    for c in reversed(coffs):
        # result = result * (a + h*s) + c
        shifted = [0.0] * (len(result) + 1)
        for i, r in enumerate(result):
            shifted[i] += a * r
            shifted[i + 1] += h * r
        shifted[0] += c
        result = shifted
    return result

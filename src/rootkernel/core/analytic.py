"""Closed-form real roots of polynomials of degree 1 through 4.

Coefficients are in the power basis, ``c[i]`` multiplying ``x^i``. The
``append_*`` functions extend a caller-supplied list; nothing is appended when
there is no real root. Degenerate leading coefficients degrade the problem to
the next lower degree instead of raising.

Cubic and quartic roots are polished with a short Newton pass. For the quartic,
a polishing step that would move a root past one of its neighbors is rejected
and the original value restored.
"""

import logging
import math
from collections.abc import MutableSequence, Sequence

from rootkernel.config.settings import ToleranceConfig
from rootkernel.domain.polynomial import Degree2PowerPolynomial
from rootkernel.utils.numeric import conditional_divide_fraction

logger = logging.getLogger(__name__)

_TOLERANCES = ToleranceConfig()

EQN_EPS = _TOLERANCES.eqn_eps
SAFE_DIVIDE_FACTOR = _TOLERANCES.safe_divide_factor
POLISH_RELATIVE_TOLERANCE = _TOLERANCES.polish_relative_tolerance
MAX_POLISH_ITERATIONS = 10


def is_zero(x: float) -> bool:
    """Absolute zero test used for discriminants and depressed coefficients."""
    return abs(x) < EQN_EPS


def is_small_ratio(x: float, y: float, abs_tol: float = 1.0e-9, rel_tol: float = 8.0e-16) -> bool:
    """Test if ``x / y`` is small without dividing."""
    return abs(x) <= abs_tol or abs(x) < rel_tol * abs(y)


def cbrt(x: float) -> float:
    """Return the real, signed cube root of x."""
    if x > 0.0:
        return math.pow(x, 1.0 / 3.0)
    if x < 0.0:
        return -math.pow(-x, 1.0 / 3.0)
    return 0.0


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> tuple[bool, float]:
    """Divide if the denominator is not relatively tiny.

    Returns:
        Tuple of (divided, value). ``value`` is ``default`` when not divided.
    """
    if abs(denominator) > SAFE_DIVIDE_FACTOR * abs(numerator):
        return True, numerator / denominator
    return False, default


def check_root_proximity(roots: Sequence[float], i: int) -> bool:
    """Test that ``roots[i]`` still lies strictly between its sorted neighbors."""
    if len(roots) < 2:
        return True
    if i == 0:
        return roots[i] < roots[i + 1]
    if i + 1 < len(roots):
        return roots[i - 1] < roots[i] < roots[i + 1]
    return roots[i] > roots[i - 1]


def newton_method_adjustment(coffs: Sequence[float], root: float, degree: int) -> float | None:
    """Return the Newton step ``f(root) / f'(root)``, or None for a flat derivative."""
    p = coffs[degree]
    q = 0.0
    for i in range(degree - 1, -1, -1):
        q = p + root * q
        p = coffs[i] + root * p
    if abs(q) >= 1.0e-14 * (1.0 + abs(root)):
        return p / q
    return None


def improve_roots(
    coffs: Sequence[float],
    degree: int,
    roots: MutableSequence[float],
    restrict_order_changes: bool,
) -> None:
    """Polish each root in place with a few Newton steps.

    A root is accepted after two successive steps below the relative tolerance.
    With ``restrict_order_changes``, a root pushed past a neighbor is restored
    to its value before polishing.
    """
    for i in range(len(roots)):
        dx = newton_method_adjustment(coffs, roots[i], degree)
        if dx is None or dx == 0.0:
            continue
        original_value = roots[i]
        counter = 0
        convergence_counter = 0
        while dx is not None and dx != 0.0 and counter < MAX_POLISH_ITERATIONS:
            if abs(dx) < POLISH_RELATIVE_TOLERANCE * (1.0 + abs(roots[i])):
                convergence_counter += 1
                if convergence_counter > 1:
                    break
            else:
                convergence_counter = 0
            roots[i] -= dx
            if restrict_order_changes and not check_root_proximity(roots, i):
                logger.debug(
                    "Polish step crossed neighbor root, reverting (index=%d, value=%r)",
                    i,
                    original_value,
                )
                roots[i] = original_value
                break
            dx = newton_method_adjustment(coffs, roots[i], degree)
            counter += 1


def most_distant_from_mean(data: Sequence[float]) -> float:
    """Return the entry of ``data`` farthest from the mean of all entries (0 if empty)."""
    if not data:
        return 0.0
    mean = sum(data) / len(data)
    d_max = 0.0
    result = data[0]
    for value in data:
        d = abs(value - mean)
        if d > d_max:
            d_max = d
            result = value
    return result


def append_linear_root(c0: float, c1: float, values: MutableSequence[float]) -> None:
    """Append the root of ``c0 + c1*x`` if the division is safe."""
    x = conditional_divide_fraction(-c0, c1)
    if x is not None:
        values.append(x)


def append_quadratic_roots(c: Sequence[float], values: MutableSequence[float]) -> None:
    """Append 0, 1 or 2 roots of ``c[0] + c[1]*x + c[2]*x^2``.

    The two-root case is appended as ``sqrt(D) - p`` then ``-sqrt(D) - p``,
    so the pair is not sorted.

    Examples:
        >>> roots = []
        >>> append_quadratic_roots([-2.0, 0.0, 1.0], roots)
        >>> sorted(round(r, 6) for r in roots)
        [-1.414214, 1.414214]
    """
    # normal form: x^2 + 2px + q = 0
    div_factor = conditional_divide_fraction(1.0, c[2])
    if div_factor is None:
        append_linear_root(c[0], c[1], values)
        return
    p = 0.5 * c[1] * div_factor
    q = c[0] * div_factor
    d = p * p - q
    if is_zero(d):
        values.append(-p)
    elif d > 0.0:
        sqrt_d = math.sqrt(d)
        values.append(sqrt_d - p)
        values.append(-sqrt_d - p)


def _cubic_roots_unsorted(c: Sequence[float]) -> list[float]:
    """Real roots of ``c[0] + c[1]*x + c[2]*x^2 + c[3]*x^3`` in solution order."""
    roots: list[float] = []
    scale_factor = conditional_divide_fraction(1.0, c[3])
    if scale_factor is None:
        append_quadratic_roots(c, roots)
        return roots

    # normal form: x^3 + Ax^2 + Bx + C = 0
    a = c[2] * scale_factor
    b = c[1] * scale_factor
    cc = c[0] * scale_factor

    # substitute x = y - A/3 to reach y^3 + 3py + 2q = 0
    sq_a = a * a
    p = (3.0 * b - sq_a) / 9.0
    q = 0.5 * (2.0 / 27.0 * a * sq_a - 1.0 / 3.0 * a * b + cc)
    cb_p = p * p * p
    d = q * q + cb_p
    origin = a / -3.0

    if d >= 0.0 and is_zero(d):
        if is_zero(q):
            return [origin, origin, origin]
        # one single and one double root
        u = cbrt(-q)
        if u < 0.0:
            return [origin + 2.0 * u, origin - u, origin - u]
        return [origin - u, origin - u, origin + 2.0 * u]

    if d <= 0.0:
        # three real roots, trigonometric form
        ratio = max(-1.0, min(1.0, -q / math.sqrt(-cb_p)))
        phi = math.acos(ratio) / 3.0
        t = 2.0 * math.sqrt(-p)
        roots = [
            origin + t * math.cos(phi),
            origin - t * math.cos(phi + math.pi / 3.0),
            origin - t * math.cos(phi - math.pi / 3.0),
        ]
        improve_roots(c, 3, roots, False)
        return roots

    # one real root, Cardano radicals
    sqrt_d = math.sqrt(d)
    u = cbrt(sqrt_d - q)
    v = -cbrt(sqrt_d + q)
    roots = [origin + u + v]
    improve_roots(c, 3, roots, False)
    return roots


def append_cubic_roots(c: Sequence[float], values: MutableSequence[float]) -> None:
    """Append the real roots of ``c[0] + c[1]*x + c[2]*x^2 + c[3]*x^3`` in ascending order.

    A true cubic always has 1 or 3 real roots (multiple roots are repeated).
    A negligible leading coefficient falls back to the quadratic solver.
    """
    values.extend(sorted(_cubic_roots_unsorted(c)))


def append_quartic_roots(c: Sequence[float], values: MutableSequence[float]) -> None:
    """Append the real roots of ``c[0] + ... + c[4]*x^4`` in ascending order.

    Uses the resolvent cubic. The resolvent root farthest from the mean of the
    resolvent roots is used to split the depressed quartic into two quadratics.
    If that split is not real, the equation has no usable real roots here and
    nothing is appended.
    """
    divided, coff_scale = safe_divide(1.0, c[4])
    if not divided:
        append_cubic_roots(c, values)
        return

    # normal form: x^4 + Ax^3 + Bx^2 + Cx + D = 0
    a = c[3] * coff_scale
    b = c[2] * coff_scale
    cc = c[1] * coff_scale
    dd = c[0] * coff_scale
    origin = -0.25 * a

    # substitute x = y - A/4 to reach y^4 + py^2 + qy + r = 0
    sq_a = a * a
    p = -3.0 / 8.0 * sq_a + b
    q = 0.125 * sq_a * a - 0.5 * a * b + cc
    r = -3.0 / 256.0 * sq_a * sq_a + 1.0 / 16.0 * sq_a * b - 0.25 * a * cc + dd

    roots: list[float] = []
    if is_zero(r):
        # no absolute term: y * (y^3 + py + q) = 0
        roots.extend(_cubic_roots_unsorted([q, p, 0.0, 1.0]))
        roots.append(0.0)
    else:
        resolvent = _cubic_roots_unsorted([0.5 * r * p - 0.125 * q * q, -r, -0.5 * p, 1.0])
        z = most_distant_from_mean(resolvent)

        u = z * z - r
        v = 2.0 * z - p
        if is_small_ratio(u, r):
            u = 0.0
        elif u > 0.0:
            u = math.sqrt(u)
        else:
            logger.debug("Quartic resolvent split is complex (u^2=%r)", u)
            return
        if is_small_ratio(v, p):
            v = 0.0
        elif v > 0.0:
            v = math.sqrt(v)
        else:
            logger.debug("Quartic resolvent split is complex (v^2=%r)", v)
            return

        append_quadratic_roots([z - u, -v if q < 0.0 else v, 1.0], roots)
        append_quadratic_roots([z + u, v if q < 0.0 else -v, 1.0], roots)

    roots = sorted(root + origin for root in roots)
    improve_roots(c, 4, roots, True)
    values.extend(roots)


def solve_quadratic(a: float, b: float, c: float) -> list[float] | None:
    """Solve ``a*x^2 + b*x + c = 0``; see ``Degree2PowerPolynomial.solve_quadratic``."""
    return Degree2PowerPolynomial.solve_quadratic(a, b, c)


def quadratic_roots(c: Sequence[float]) -> list[float]:
    """Return the sorted real roots of a quadratic given as ``[c0, c1, c2]``."""
    roots: list[float] = []
    append_quadratic_roots(c, roots)
    return sorted(roots)


def cubic_roots(c: Sequence[float]) -> list[float]:
    """Return the sorted real roots of a cubic given as ``[c0, c1, c2, c3]``."""
    roots: list[float] = []
    append_cubic_roots(c, roots)
    return roots


def quartic_roots(c: Sequence[float]) -> list[float]:
    """Return the sorted real roots of a quartic given as ``[c0, ..., c4]``."""
    roots: list[float] = []
    append_quartic_roots(c, roots)
    return roots


def polynomial_roots(coffs: Sequence[float]) -> list[float]:
    """Return the sorted real roots of a power-basis polynomial of degree at most 4.

    Shorter inputs are padded with zero high-order coefficients. A constant
    polynomial has no roots.

    Raises:
        ValueError: If more than 5 coefficients are supplied
    """
    if len(coffs) > 5:
        raise ValueError(f"Closed-form solve supports degree <= 4, got {len(coffs) - 1}")
    padded = list(coffs) + [0.0] * (5 - len(coffs))
    degree = len(coffs) - 1
    roots: list[float] = []
    if degree == 1:
        append_linear_root(padded[0], padded[1], roots)
    elif degree == 2:
        append_quadratic_roots(padded, roots)
    elif degree == 3:
        append_cubic_roots(padded, roots)
    elif degree == 4:
        append_quartic_roots(padded, roots)
    return sorted(roots)

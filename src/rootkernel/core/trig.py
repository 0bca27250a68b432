"""Roots of equations in cos(theta) and sin(theta).

Trigonometric equations are reduced to polynomials with the rational
parametrization of the unit circle::

    cos = C(t) / W(t),  sin = S(t) / W(t)
    C(t) = 1 - 2t,  S(t) = 2t - 2t^2,  W(t) = 1 - 2t + 2t^2

t = 0 maps to angle 0, t = 1 to pi, and t -> infinity to -pi/2. When the
substituted polynomial loses degree, the angle at infinity is a root.

Key functions:
- solve_angles: Solve a substituted polynomial and convert t roots to angles
- solve_unit_circle_implicit_quadric_intersection: Conic / unit circle
- solve_unit_circle_ellipse_intersection: Parametric ellipse / unit circle
- append_implicit_line_unit_circle_intersections: Line / unit circle
"""

import logging
import math
from collections.abc import MutableSequence, Sequence

from rootkernel.config.settings import ToleranceConfig
from rootkernel.core import analytic, power
from rootkernel.domain import LineCircleSolutionType, TrigSolution
from rootkernel.utils.numeric import conditional_divide_fraction, hypotenuse_xyz

logger = logging.getLogger(__name__)

_TOLERANCES = ToleranceConfig()

SMALL_ANGLE = _TOLERANCES.trig_small_angle
COEFFICIENT_REL_TOL = _TOLERANCES.trig_coefficient_rel_tol
ANGLE_AT_INFINITY = -0.5 * math.pi

# Power-basis coefficients of products of C, S and W.
S = (0.0, 2.0, -2.0)
C = (1.0, -2.0)
W = (1.0, -2.0, 2.0)
CW = (1.0, -4.0, 6.0, -4.0)
SW = (0.0, 2.0, -6.0, 8.0, -4.0)
SC = (0.0, 2.0, -6.0, 4.0)
SS = (0.0, 0.0, 4.0, -8.0, 4.0)
CC = (1.0, -4.0, 4.0)
WW = (1.0, -4.0, 8.0, -8.0, 4.0)
CC_MINUS_SS = (1.0, -4.0, 0.0, 8.0, -4.0)


def solve_angles(
    coff: Sequence[float],
    nominal_degree: int,
    reference_coefficient: float,
    radians: MutableSequence[float],
) -> bool:
    """Solve the substituted polynomial and append each root as an angle.

    Leading coefficients within ``SMALL_ANGLE`` of the largest coefficient
    (``reference_coefficient`` included) are treated as zero. Each lost degree
    means a root at t = infinity, reported once as -pi/2.

    Args:
        coff: Power-basis coefficients in t, at least ``nominal_degree + 1`` long
        nominal_degree: Degree before trimming
        reference_coefficient: Scale of the original problem's coefficients
        radians: Receives the angles

    Returns:
        False if every coefficient is zero (every angle solves the equation) or
        no angle was appended.
    """
    max_coff = abs(reference_coefficient)
    for i in range(nominal_degree + 1):
        max_coff = max(max_coff, abs(coff[i]))

    coff_tol = SMALL_ANGLE * max_coff
    degree = nominal_degree
    while degree > 0 and abs(coff[degree]) <= coff_tol:
        degree -= 1
    if degree == 0 and abs(coff[0]) <= coff_tol:
        logger.debug("All-zero trig equation; every angle is a solution")
        return False

    roots: list[float] = []
    if degree == 1:
        analytic.append_linear_root(coff[0], coff[1], roots)
    elif degree == 2:
        analytic.append_quadratic_roots(coff, roots)
    elif degree == 3:
        analytic.append_cubic_roots(coff, roots)
    elif degree == 4:
        analytic.append_quartic_roots(coff, roots)

    num_initial = len(radians)
    for t in roots:
        radians.append(math.atan2(power.evaluate(S, t), power.evaluate(C, t)))
    if degree < nominal_degree:
        radians.append(ANGLE_AT_INFINITY)
    return len(radians) > num_initial


def solve_unit_circle_implicit_quadric_intersection(
    axx: float,
    axy: float,
    ayy: float,
    ax: float,
    ay: float,
    a1: float,
    radians: MutableSequence[float],
) -> bool:
    """Find unit circle angles on ``axx*x^2 + axy*x*y + ayy*y^2 + ax*x + ay*y + a1 = 0``.

    The substitution is degree 4 when the quadratic terms are significant
    relative to the linear ones, degree 2 otherwise.

    Returns:
        True if any angle was appended to ``radians``.
    """
    reference = max(abs(axx), abs(axy), abs(ayy), abs(ax), abs(ay), abs(a1))
    if hypotenuse_xyz(axx, axy, ayy) > COEFFICIENT_REL_TOL * hypotenuse_xyz(ax, ay, a1):
        degree = 4
        coffs = power.zero(5)
        coffs = power.accumulate(coffs, CW, ax)
        coffs = power.accumulate(coffs, SW, ay)
        coffs = power.accumulate(coffs, WW, a1)
        coffs = power.accumulate(coffs, SS, ayy)
        coffs = power.accumulate(coffs, CC, axx)
        coffs = power.accumulate(coffs, SC, axy)
    else:
        degree = 2
        coffs = power.zero(3)
        coffs = power.accumulate(coffs, C, ax)
        coffs = power.accumulate(coffs, S, ay)
        coffs = power.accumulate(coffs, W, a1)
    return solve_angles(coffs, degree, reference, radians)


def solve_unit_circle_ellipse_intersection(
    cx: float,
    cy: float,
    ux: float,
    uy: float,
    vx: float,
    vy: float,
    ellipse_radians: MutableSequence[float],
    circle_radians: MutableSequence[float],
) -> bool:
    """Intersect the unit circle with the ellipse ``c + u*cos(theta) + v*sin(theta)``.

    Args:
        cx, cy: Ellipse center
        ux, uy: Vector to the point at theta = 0
        vx, vy: Vector to the point at theta = pi/2
        ellipse_radians: Receives the ellipse parameter of each intersection
        circle_radians: Receives the unit circle angle of each intersection

    Returns:
        True if any intersection was found.
    """
    acc = ux * ux + uy * uy
    acs = 2.0 * (ux * vx + uy * vy)
    ass = vx * vx + vy * vy
    ac = 2.0 * (ux * cx + uy * cy)
    asi = 2.0 * (vx * cx + vy * cy)
    a = cx * cx + cy * cy - 1.0

    angles: list[float] = []
    found = solve_unit_circle_implicit_quadric_intersection(acc, acs, ass, ac, asi, a, angles)
    for theta in angles:
        c = math.cos(theta)
        s = math.sin(theta)
        ellipse_radians.append(theta)
        circle_radians.append(math.atan2(cy + uy * c + vy * s, cx + ux * c + vx * s))
    return found


def solve_unit_circle_homogeneous_ellipse_intersection(
    cx: float,
    cy: float,
    cw: float,
    ux: float,
    uy: float,
    uw: float,
    vx: float,
    vy: float,
    vw: float,
    ellipse_radians: MutableSequence[float],
    circle_radians: MutableSequence[float],
) -> bool:
    """Like solve_unit_circle_ellipse_intersection, for a homogeneous (weighted) ellipse.

    The ellipse point is ``(x/w, y/w)`` with each of x, y, w of the form
    ``c + u*cos(theta) + v*sin(theta)``.

    Returns:
        True if any intersection was found.
    """
    acc = ux * ux + uy * uy - uw * uw
    acs = 2.0 * (ux * vx + uy * vy - uw * vw)
    ass = vx * vx + vy * vy - vw * vw
    ac = 2.0 * (ux * cx + uy * cy - uw * cw)
    asi = 2.0 * (vx * cx + vy * cy - vw * cw)
    a = cx * cx + cy * cy - cw * cw

    angles: list[float] = []
    solve_unit_circle_implicit_quadric_intersection(acc, acs, ass, ac, asi, a, angles)
    found = False
    for theta in angles:
        c = math.cos(theta)
        s = math.sin(theta)
        w = cw + uw * c + vw * s
        px = conditional_divide_fraction(cx + ux * c + vx * s, w)
        py = conditional_divide_fraction(cy + uy * c + vy * s, w)
        if px is None or py is None:
            logger.debug("Skipping intersection at infinity (theta=%r)", theta)
            continue
        ellipse_radians.append(theta)
        circle_radians.append(math.atan2(py, px))
        found = True
    return found


def append_implicit_line_unit_circle_intersections(
    alpha: float,
    beta: float,
    gamma: float,
    cos_values: MutableSequence[float] | None,
    sin_values: MutableSequence[float] | None,
    radians_values: MutableSequence[float] | None,
    rel_tol: float = 1.0e-14,
) -> LineCircleSolutionType:
    """Intersect the line ``alpha + beta*c + gamma*s = 0`` with the unit circle.

    Any of the output lists may be None. When the line misses the circle, the
    closest line point and the closest circle point are appended instead, in
    that order.

    Returns:
        Classification of the configuration.
    """
    delta2 = beta * beta + gamma * gamma
    if delta2 <= 0.0:
        if alpha == 0.0:
            return LineCircleSolutionType.ALL_SOLUTIONS
        return LineCircleSolutionType.NO_LINE

    def append(c: float, s: float) -> None:
        if cos_values is not None:
            cos_values.append(c)
        if sin_values is not None:
            sin_values.append(s)
        if radians_values is not None:
            radians_values.append(math.atan2(s, c))

    lam = -alpha / delta2
    a2 = alpha * alpha
    d2a = 1.0 - a2 / delta2
    two_tol = 2.0 * rel_tol

    if d2a < two_tol:
        # closest line point, then the unit circle point nearest it
        delta = math.sqrt(delta2)
        iota = 1.0 / delta if alpha < 0.0 else -1.0 / delta
        append(lam * beta, lam * gamma)
        append(beta * iota, gamma * iota)
        if d2a < -two_tol:
            return LineCircleSolutionType.NO_INTERSECTION
        return LineCircleSolutionType.TANGENT

    mu = math.sqrt(d2a / delta2)
    c0 = lam * beta
    s0 = lam * gamma
    append(c0 - mu * gamma, s0 + mu * beta)
    append(c0 + mu * gamma, s0 - mu * beta)
    return LineCircleSolutionType.TWO_INTERSECTIONS


def trig_solutions(radians: Sequence[float]) -> list[TrigSolution]:
    """Pair each angle with its cosine and sine."""
    return [TrigSolution.from_radians(theta) for theta in radians]

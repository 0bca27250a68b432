"""Core root-finding algorithms for rootkernel.

This module contains the core algorithms for:

- Closed-form real roots of degree 1 to 4 polynomials
- Bezier-basis polynomials (evaluation, subdivision, deflation, roots)
- Trigonometric equations reduced to polynomials
- Newton iteration for one and two unknowns

All functions are:
- Synchronous and single-threaded
- Free of side effects beyond caller-supplied output lists
- Silent on numeric failure (None, False or empty results)

Key functions:
- polynomial_roots: Sorted real roots of a degree <= 4 power polynomial
- solve_angles: Angles from a substituted trigonometric polynomial
- solve_unit_circle_ellipse_intersection: Unit circle / ellipse angles
- power_to_bezier / bezier_to_power: Basis conversion

Key classes:
- BezierCoffs, Order2Bezier .. Order5Bezier, UnivariateBezier
- Newton1dUnbounded, Newton1dUnboundedApproximateDerivative,
  Newton2dUnboundedWithDerivative
- RootSolver: Validating facade with statistics
"""

from rootkernel.core.analytic import (
    append_cubic_roots,
    append_linear_root,
    append_quadratic_roots,
    append_quartic_roots,
    cubic_roots,
    polynomial_roots,
    quadratic_roots,
    quartic_roots,
    solve_quadratic,
)
from rootkernel.core.bezier import (
    BezierCoffs,
    Order2Bezier,
    Order3Bezier,
    Order4Bezier,
    Order5Bezier,
    UnivariateBezier,
    bezier_to_power,
    create_bezier,
    power_to_bezier,
)
from rootkernel.core.linear import (
    BilinearPolynomial,
    linear_system_2d,
    solve_bilinear_pair,
)
from rootkernel.core.newton import (
    AbstractNewtonIterator,
    Newton1dUnbounded,
    Newton1dUnboundedApproximateDerivative,
    Newton2dUnboundedWithDerivative,
    NewtonEvaluatorRRtoRRD,
    NewtonEvaluatorRtoR,
    NewtonEvaluatorRtoRD,
)
from rootkernel.core.solver import RootSolver
from rootkernel.core.trig import (
    append_implicit_line_unit_circle_intersections,
    solve_angles,
    solve_unit_circle_ellipse_intersection,
    solve_unit_circle_homogeneous_ellipse_intersection,
    solve_unit_circle_implicit_quadric_intersection,
)

__all__ = [
    # Newton framework
    "AbstractNewtonIterator",
    # Bezier classes
    "BezierCoffs",
    # Small systems
    "BilinearPolynomial",
    "Newton1dUnbounded",
    "Newton1dUnboundedApproximateDerivative",
    "Newton2dUnboundedWithDerivative",
    "NewtonEvaluatorRRtoRRD",
    "NewtonEvaluatorRtoR",
    "NewtonEvaluatorRtoRD",
    "Order2Bezier",
    "Order3Bezier",
    "Order4Bezier",
    "Order5Bezier",
    # Facade
    "RootSolver",
    "UnivariateBezier",
    # Analytic roots
    "append_cubic_roots",
    "append_implicit_line_unit_circle_intersections",
    "append_linear_root",
    "append_quadratic_roots",
    "append_quartic_roots",
    "bezier_to_power",
    "create_bezier",
    "cubic_roots",
    "linear_system_2d",
    "polynomial_roots",
    "power_to_bezier",
    "quadratic_roots",
    "quartic_roots",
    "solve_angles",
    "solve_bilinear_pair",
    "solve_quadratic",
    # Trig
    "solve_unit_circle_ellipse_intersection",
    "solve_unit_circle_homogeneous_ellipse_intersection",
    "solve_unit_circle_implicit_quadric_intersection",
]

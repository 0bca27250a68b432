"""Small fixed-size linear and bilinear systems.

Key functions:
- linear_system_2d: Solve a 2x2 linear system by Cramer's rule
- solve_bilinear_pair: Solve two simultaneous bilinear equations in (u, v)
"""

from dataclasses import dataclass

from rootkernel.domain import XY, Degree2PowerPolynomial
from rootkernel.utils.numeric import conditional_divide_fraction, cross_product_xyxy


def linear_system_2d(
    ux: float,
    vx: float,
    uy: float,
    vy: float,
    cx: float,
    cy: float,
) -> XY | None:
    """Solve ``ux*x + vx*y = cx`` and ``uy*x + vy*y = cy``.

    Args:
        ux: Row 0, column 0 coefficient
        vx: Row 0, column 1 coefficient
        uy: Row 1, column 0 coefficient
        vy: Row 1, column 1 coefficient
        cx: Row 0 right hand side
        cy: Row 1 right hand side

    Returns:
        Solution (x, y), or None if the matrix is singular relative to the
        right hand side.

    Examples:
        >>> linear_system_2d(2.0, 0.0, 0.0, 4.0, 1.0, 1.0)
        XY(x=0.5, y=0.25)
    """
    uv = cross_product_xyxy(ux, uy, vx, vy)
    cv = cross_product_xyxy(cx, cy, vx, vy)
    cu = cross_product_xyxy(ux, uy, cx, cy)
    s = conditional_divide_fraction(cv, uv)
    t = conditional_divide_fraction(cu, uv)
    if s is not None and t is not None:
        return XY(s, t)
    return None


@dataclass(frozen=True, slots=True)
class BilinearPolynomial:
    """Bilinear expression ``f(u, v) = a + b*u + c*v + d*u*v``."""

    a: float
    b: float
    c: float
    d: float

    def evaluate(self, u: float, v: float) -> float:
        return self.a + self.b * u + v * (self.c + self.d * u)

    @classmethod
    def from_unit_square_values(
        cls, f00: float, f10: float, f01: float, f11: float
    ) -> "BilinearPolynomial":
        """Build from the values at the corners (0,0), (1,0), (0,1), (1,1)."""
        return cls(f00, f10 - f00, f01 - f00, f11 - f10 - f01 + f00)


def solve_bilinear_pair(
    a0: float,
    b0: float,
    c0: float,
    d0: float,
    a1: float,
    b1: float,
    c1: float,
    d1: float,
) -> list[XY] | None:
    """Solve ``a0 + b0*u + c0*v + d0*u*v = 0`` and ``a1 + b1*u + c1*v + d1*u*v = 0``.

    Eliminating v leaves a quadratic in u; v is recovered from whichever
    equation is not degenerate at that u.

    Returns:
        List of (u, v) solutions, or None when the quadratic in u has no real root.
    """
    e0 = cross_product_xyxy(a0, a1, c0, c1)
    e1 = cross_product_xyxy(b0, b1, c0, c1) + cross_product_xyxy(a0, a1, d0, d1)
    e2 = cross_product_xyxy(b0, b1, d0, d1)
    u_roots = Degree2PowerPolynomial.solve_quadratic(e2, e1, e0)
    if u_roots is None:
        return None
    solutions: list[XY] = []
    for u in u_roots:
        v0 = conditional_divide_fraction(-(a0 + b0 * u), c0 + d0 * u)
        v1 = conditional_divide_fraction(-(a1 + b1 * u), c1 + d1 * u)
        if v0 is not None:
            solutions.append(XY(u, v0))
        elif v1 is not None:
            solutions.append(XY(u, v1))
    return solutions


def solve_bilinear_polynomial_pair(
    p: BilinearPolynomial,
    p_value: float,
    q: BilinearPolynomial,
    q_value: float,
) -> list[XY] | None:
    """Solve ``p(u, v) = p_value`` and ``q(u, v) = q_value`` simultaneously."""
    return solve_bilinear_pair(
        p.a - p_value, p.b, p.c, p.d, q.a - q_value, q.b, q.c, q.d
    )

"""One-dimensional polynomials in Bernstein (Bezier) basis.

A Bezier polynomial of order ``n`` (degree ``n - 1``) has ``n`` coefficients
``b[i]`` multiplying ``C(n-1, i) * u^i * (1-u)^(n-1-i)``. Each object owns its
coefficient list; deflation and scaling modify it in place.

Key classes:
- BezierCoffs: Abstract base with subdivision, filtering and generic roots
- Order2Bezier .. Order5Bezier: Fixed orders with closed-form evaluation and
  analytic roots
- UnivariateBezier: Any order, with deflation and Newton-based root extraction

Key functions:
- create_bezier: Pick the specialized class for a coefficient count
- power_to_bezier / bezier_to_power: Explicit basis conversion
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

from rootkernel.config.settings import NewtonConfig
from rootkernel.core import pascal
from rootkernel.core.analytic import cubic_roots, quartic_roots
from rootkernel.core.newton import Newton1dUnbounded, NewtonEvaluatorRtoRD
from rootkernel.domain import (
    Degree2PowerPolynomial,
    Degree3PowerPolynomial,
    Degree4PowerPolynomial,
)
from rootkernel.exceptions import CoefficientError, OrderMismatchError
from rootkernel.utils.numeric import (
    SMALL_METRIC_DISTANCE,
    conditional_divide_fraction,
    is_in_01,
)

logger = logging.getLogger(__name__)

_NEWTON_DEFAULTS = NewtonConfig()
DEFLATION_NEWTON_TOLERANCE = 1.0e-10


def bezier_iteration_config(config: NewtonConfig | None = None) -> NewtonConfig:
    """Return the iteration settings used for Newton on Bezier polynomials.

    The generic budget and step tolerance are replaced by the ``bezier_*``
    fields of ``config``.
    """
    config = config or _NEWTON_DEFAULTS
    return config.model_copy(
        update={
            "step_size_tolerance": config.bezier_step_tolerance,
            "max_iterations": config.bezier_max_iterations,
        }
    )


class BezierCoffs(ABC):
    """Abstract base for Bezier polynomials from u to f(u).

    Args:
        data: Either an order (zero coefficients of that count) or a sequence
            of coefficients, which is copied.
    """

    def __init__(self, data: int | Sequence[float]) -> None:
        if isinstance(data, int):
            self.coffs: list[float] = [0.0] * data
        else:
            self.coffs = [float(a) for a in data]

    @property
    def order(self) -> int:
        """Number of coefficients (degree + 1)."""
        return len(self.coffs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.coffs!r})"

    @abstractmethod
    def evaluate(self, u: float) -> float:
        """Sum of basis functions times coefficients at u."""

    @abstractmethod
    def basis_functions(self, u: float) -> list[float]:
        """Return the basis function values at u."""

    def copy_from(self, other: "BezierCoffs") -> None:
        """Copy coefficients from other. The order of this object may change."""
        self.coffs = list(other.coffs)

    def scale_in_place(self, scale: float) -> None:
        self.coffs = [a * scale for a in self.coffs]

    def add_in_place(self, a: float) -> None:
        """Add a constant to each coefficient (shifts the function by a)."""
        self.coffs = [b + a for b in self.coffs]

    def zero(self) -> None:
        self.coffs = [0.0] * self.order

    def roots(
        self,
        target_value: float,
        restrict_to_01: bool,
        newton_config: NewtonConfig | None = None,
    ) -> list[float] | None:
        """Return parameters where the polynomial equals ``target_value``.

        The generic implementation extracts roots by deflation, which only
        searches [0, 1]. Fixed-order classes override this with analytic solves
        and ignore ``newton_config``.

        Args:
            target_value: Value to solve for
            restrict_to_01: Drop roots outside [0, 1]
            newton_config: Iteration settings for the deflation Newton steps

        Returns:
            Ascending roots. None if there are none and the result was
            restricted to [0, 1].
        """
        bezier = UnivariateBezier.create_from(self)
        bezier.add_in_place(-target_value)
        found = UnivariateBezier.deflate_roots_01(bezier, newton_config)
        return self.filter_01(found, restrict_to_01)

    @staticmethod
    def filter_01(roots: Sequence[float] | None, restrict_to_01: bool = False) -> list[float] | None:
        """Optionally drop roots outside [0, 1].

        Returns:
            A copy of roots when not restricting. Otherwise the roots in
            [0, 1], or None if none remain.
        """
        if roots is None:
            return None
        if not restrict_to_01:
            return list(roots)
        kept = [r for r in roots if is_in_01(r)]
        return kept or None

    def subdivide(self, u: float, left: "BezierCoffs", right: "BezierCoffs") -> bool:
        """Split at u into caller-supplied left and right pieces of the same order.

        Uses repeated linear interpolation (de Casteljau). The left piece covers
        [0, u] and the right piece [u, 1], each reparametrized to [0, 1].

        Returns:
            False if either destination has a different order.
        """
        order = self.order
        if left.order != order or right.order != order:
            return False
        v = 1.0 - u
        work = list(self.coffs)
        left_coffs = [0.0] * order
        n1 = order - 1
        for i0 in range(order):
            left_coffs[i0] = work[0]
            for i in range(n1):
                work[i] = v * work[i] + u * work[i + 1]
            n1 -= 1
        left.coffs = left_coffs
        right.coffs = work
        return True

    @staticmethod
    def max_abs_diff(data_a: "BezierCoffs", data_b: "BezierCoffs") -> float | None:
        """Return the largest coefficient difference, or None if the orders differ."""
        if data_a.order != data_b.order:
            return None
        return max((abs(a - b) for a, b in zip(data_a.coffs, data_b.coffs, strict=True)), default=0.0)


class Order2Bezier(BezierCoffs):
    """Linear Bezier (2 coefficients)."""

    def __init__(self, f0: float = 0.0, f1: float = 0.0) -> None:
        super().__init__([f0, f1])

    @classmethod
    def from_coffs(cls, coffs: Sequence[float]) -> "Order2Bezier":
        if len(coffs) != 2:
            raise OrderMismatchError(coffs, 2)
        return cls(*coffs)

    def clone(self) -> "Order2Bezier":
        return Order2Bezier(*self.coffs)

    @staticmethod
    def solve_coffs(a0: float, a1: float) -> float | None:
        """Return the fraction where the line through (0, a0), (1, a1) crosses zero."""
        return conditional_divide_fraction(-a0, a1 - a0)

    def basis_functions(self, u: float) -> list[float]:
        return [1.0 - u, u]

    def evaluate(self, u: float) -> float:
        return (1.0 - u) * self.coffs[0] + u * self.coffs[1]

    def solve(self, right_hand_side: float) -> float | None:
        """Return the single u with f(u) = right_hand_side, or None for a flat line."""
        df = self.coffs[1] - self.coffs[0]
        return conditional_divide_fraction(right_hand_side - self.coffs[0], df)

    def roots(
        self,
        target_value: float,
        restrict_to_01: bool,
        newton_config: NewtonConfig | None = None,
    ) -> list[float] | None:
        x = self.solve(target_value)
        if x is None:
            return None
        return self.filter_01([x], restrict_to_01)


class Order3Bezier(BezierCoffs):
    """Quadratic Bezier (3 coefficients)."""

    def __init__(self, f0: float = 0.0, f1: float = 0.0, f2: float = 0.0) -> None:
        super().__init__([f0, f1, f2])

    @classmethod
    def from_coffs(cls, coffs: Sequence[float]) -> "Order3Bezier":
        if len(coffs) != 3:
            raise OrderMismatchError(coffs, 3)
        return cls(*coffs)

    def clone(self) -> "Order3Bezier":
        return Order3Bezier(*self.coffs)

    def basis_functions(self, u: float) -> list[float]:
        v = 1.0 - u
        return [v * v, 2.0 * u * v, u * u]

    def add_square_linear(self, f0: float, f1: float, a: float) -> None:
        """Add ``a`` times the square of the linear Bezier (f0, f1)."""
        self.coffs[0] += a * f0 * f0
        self.coffs[1] += a * f0 * f1
        self.coffs[2] += a * f1 * f1

    def roots(
        self,
        target_value: float,
        restrict_to_01: bool,
        newton_config: NewtonConfig | None = None,
    ) -> list[float] | None:
        a0 = self.coffs[0] - target_value
        a1 = self.coffs[1] - target_value
        a2 = self.coffs[2] - target_value
        a01 = a1 - a0
        a12 = a2 - a1
        a012 = a12 - a01
        roots = Degree2PowerPolynomial.solve_quadratic(a012, 2.0 * a01, a0)
        return self.filter_01(roots, restrict_to_01)

    def evaluate(self, u: float) -> float:
        v = 1.0 - u
        return self.coffs[0] * v * v + u * (2.0 * self.coffs[1] * v + self.coffs[2] * u)


def _hull_excludes_zero(values: Sequence[float]) -> bool:
    """True if every value is beyond SMALL_METRIC_DISTANCE on the same side of zero."""
    return min(values) > SMALL_METRIC_DISTANCE or max(values) < -SMALL_METRIC_DISTANCE


def _hull_is_zero(values: Sequence[float]) -> bool:
    return min(values) >= -SMALL_METRIC_DISTANCE and max(values) < SMALL_METRIC_DISTANCE


class Order4Bezier(BezierCoffs):
    """Cubic Bezier (4 coefficients)."""

    def __init__(self, f0: float = 0.0, f1: float = 0.0, f2: float = 0.0, f3: float = 0.0) -> None:
        super().__init__([f0, f1, f2, f3])

    @classmethod
    def from_coffs(cls, coffs: Sequence[float]) -> "Order4Bezier":
        if len(coffs) != 4:
            raise OrderMismatchError(coffs, 4)
        return cls(*coffs)

    def clone(self) -> "Order4Bezier":
        return Order4Bezier(*self.coffs)

    @staticmethod
    def create_product_order3_order2(factor_a: Order3Bezier, factor_b: Order2Bezier) -> "Order4Bezier":
        a = factor_a.coffs
        b = factor_b.coffs
        return Order4Bezier(
            a[0] * b[0],
            (a[0] * b[1] + 2.0 * a[1] * b[0]) / 3.0,
            (2.0 * a[1] * b[1] + a[2] * b[0]) / 3.0,
            a[2] * b[1],
        )

    @staticmethod
    def create_from_degree3_power_polynomial(source: Degree3PowerPolynomial) -> "Order4Bezier":
        """Convert a power-basis cubic on [0, 1] to Bezier form."""
        f0 = source.evaluate(0.0)
        d0 = source.evaluate_derivative(0.0)
        d1 = source.evaluate_derivative(1.0)
        f1 = source.evaluate(1.0)
        a = 3.0
        return Order4Bezier(f0, f0 + d0 / a, f1 - d1 / a, f1)

    def basis_functions(self, u: float) -> list[float]:
        v = 1.0 - u
        uu = u * u
        vv = v * v
        return [vv * v, 3.0 * vv * u, 3.0 * v * uu, u * uu]

    def evaluate(self, u: float) -> float:
        v1 = 1.0 - u
        v2 = v1 * v1
        v3 = v2 * v1
        return self.coffs[0] * v3 + u * (
            3.0 * self.coffs[1] * v2 + u * (3.0 * self.coffs[2] * v1 + u * self.coffs[3])
        )

    def roots(
        self,
        target_value: float,
        restrict_to_01: bool,
        newton_config: NewtonConfig | None = None,
    ) -> list[float] | None:
        """Solve via the power-basis cubic.

        When every shifted coefficient is within SMALL_METRIC_DISTANCE of zero
        the function is identically the target and evenly spaced parameters
        are returned. When restricted to [0, 1], a control polygon strictly on
        one side of the target has no roots there.
        """
        y0, y1, y2, y3 = (a - target_value for a in self.coffs)
        ys = (y0, y1, y2, y3)
        if _hull_is_zero(ys):
            return [0.0, 1.0 / 3.0, 2.0 / 3.0, 1.0]
        if restrict_to_01 and _hull_excludes_zero(ys):
            return None
        cc = [
            y0,
            3.0 * (y1 - y0),
            3.0 * (y0 - 2.0 * y1 + y2),
            -y0 + 3.0 * y1 - 3.0 * y2 + y3,
        ]
        return self.filter_01(cubic_roots(cc), restrict_to_01)


class Order5Bezier(BezierCoffs):
    """Quartic Bezier (5 coefficients)."""

    def __init__(
        self,
        f0: float = 0.0,
        f1: float = 0.0,
        f2: float = 0.0,
        f3: float = 0.0,
        f4: float = 0.0,
    ) -> None:
        super().__init__([f0, f1, f2, f3, f4])

    @classmethod
    def from_coffs(cls, coffs: Sequence[float]) -> "Order5Bezier":
        if len(coffs) != 5:
            raise OrderMismatchError(coffs, 5)
        return cls(*coffs)

    def clone(self) -> "Order5Bezier":
        return Order5Bezier(*self.coffs)

    @staticmethod
    def create_from_degree4_power_polynomial(source: Degree4PowerPolynomial) -> "Order5Bezier":
        """Convert a power-basis quartic on [0, 1] to Bezier form."""
        f0 = source.evaluate(0.0)
        d0 = source.evaluate_derivative(0.0)
        d4 = source.evaluate_derivative(1.0)
        f4 = source.evaluate(1.0)
        a = 0.25
        fa = f0 + a * d0
        fm = 2.0 * fa - f0 + source.c2 / 6.0
        return Order5Bezier(f0, fa, fm, f4 - d4 * a, f4)

    def basis_functions(self, u: float) -> list[float]:
        v = 1.0 - u
        uu = u * u
        vv = v * v
        return [vv * vv, 4.0 * vv * v * u, 6.0 * vv * uu, 4.0 * v * uu * u, uu * uu]

    def evaluate(self, u: float) -> float:
        v1 = 1.0 - u
        v2 = v1 * v1
        v3 = v2 * v1
        v4 = v2 * v2
        c = self.coffs
        return c[0] * v4 + u * (
            4.0 * c[1] * v3 + u * (6.0 * c[2] * v2 + u * (4.0 * c[3] * v1 + u * c[4]))
        )

    def add_product(self, f: Order3Bezier, g: Order3Bezier, a: float) -> None:
        """Add ``a * f * g`` for two quadratic Beziers."""
        fc = f.coffs
        gc = g.coffs
        self.coffs[0] += a * fc[0] * gc[0]
        self.coffs[1] += a * (fc[0] * gc[1] + fc[1] * gc[0]) * 0.5
        self.coffs[2] += a * (fc[0] * gc[2] + 4.0 * fc[1] * gc[1] + fc[2] * gc[0]) / 6.0
        self.coffs[3] += a * (fc[1] * gc[2] + fc[2] * gc[1]) * 0.5
        self.coffs[4] += a * fc[2] * gc[2]

    def add_constant(self, a: float) -> None:
        self.add_in_place(a)

    def roots(
        self,
        target_value: float,
        restrict_to_01: bool,
        newton_config: NewtonConfig | None = None,
    ) -> list[float] | None:
        """Solve via the power-basis quartic; see Order4Bezier.roots for the hull tests."""
        y0, y1, y2, y3, y4 = (a - target_value for a in self.coffs)
        ys = (y0, y1, y2, y3, y4)
        if _hull_is_zero(ys):
            return [0.0, 0.25, 0.5, 0.75, 1.0]
        if restrict_to_01 and _hull_excludes_zero(ys):
            return None
        cc = [
            y0,
            4.0 * (-y0 + y1),
            6.0 * (y0 - 2.0 * y1 + y2),
            4.0 * (-y0 + 3.0 * y1 - 3.0 * y2 + y3),
            y0 - 4.0 * y1 + 6.0 * y2 - 4.0 * y3 + y4,
        ]
        return self.filter_01(quartic_roots(cc), restrict_to_01)


class _BezierNewtonEvaluator(NewtonEvaluatorRtoRD):
    """Value and derivative of a Bezier polynomial, refusing steps that look divergent."""

    def __init__(self, coffs: Sequence[float], big_step: float) -> None:
        super().__init__()
        self._coffs = coffs
        self._big_step = big_step

    def evaluate(self, x: float) -> bool:
        coffs = self._coffs
        order = len(coffs)
        basis = pascal.bezier_basis_values(order, x)
        slopes = pascal.bezier_basis_derivatives(order, x)
        f = sum(c * b for c, b in zip(coffs, basis, strict=True))
        df = sum(c * d for c, d in zip(coffs, slopes, strict=True))
        if abs(f) > self._big_step * abs(df):
            return False
        self.current_f = f
        self.current_dfdx = df
        return True


class UnivariateBezier(BezierCoffs):
    """Bezier polynomial of arbitrary order.

    Polynomials that come out of curve queries (projection, intersection) are
    typically of order 8 to 12. Orders past ``pascal.MAX_SAFE_ROW + 1`` are
    rejected by the Pascal table.
    """

    def clone(self) -> "UnivariateBezier":
        return UnivariateBezier(self.coffs)

    @classmethod
    def create_from(cls, other: BezierCoffs) -> "UnivariateBezier":
        """Copy any Bezier (including fixed-order classes) into a general one."""
        return cls(other.coffs)

    @classmethod
    def create_coffs(cls, coffs: Sequence[float]) -> "UnivariateBezier":
        return cls(coffs)

    @classmethod
    def create_product(cls, bezier_a: BezierCoffs, bezier_b: BezierCoffs) -> "UnivariateBezier":
        """Return the product polynomial, of order ``order_a + order_b - 1``."""
        result = cls(bezier_a.order + bezier_b.order - 1)
        pascal_a = pascal.get_row(bezier_a.order - 1)
        pascal_b = pascal.get_row(bezier_b.order - 1)
        pascal_c = pascal.get_row(bezier_a.order + bezier_b.order - 2)
        for i_a, coff_a in enumerate(bezier_a.coffs):
            a = coff_a * pascal_a[i_a]
            for i_b, coff_b in enumerate(bezier_b.coffs):
                b = coff_b * pascal_b[i_b]
                i_c = i_a + i_b
                result.coffs[i_c] += a * b / pascal_c[i_c]
        return result

    def basis_functions(self, u: float) -> list[float]:
        return pascal.bezier_basis_values(self.order, u)

    def evaluate(self, u: float) -> float:
        basis = pascal.bezier_basis_values(self.order, u)
        return sum(b * c for b, c in zip(basis, self.coffs, strict=True))

    def deflate_left(self) -> None:
        """Divide out the root at u = 0. The caller promises ``coffs[0]`` is zero."""
        order1 = self.order
        order0 = order1 - 1
        if order0 < 1:
            self.coffs = []
            return
        coff0 = pascal.get_row(order0 - 1)
        coff1 = pascal.get_row(order1 - 1)
        self.coffs = [self.coffs[i + 1] * coff1[i + 1] / coff0[i] for i in range(order0)]

    def deflate_right(self) -> None:
        """Divide out the root at u = 1. The caller promises the last coefficient is zero."""
        order1 = self.order
        order0 = order1 - 1
        if order0 < 1:
            self.coffs = []
            return
        coff0 = pascal.get_row(order0 - 1)
        coff1 = pascal.get_row(order1 - 1)
        self.coffs = [self.coffs[i] * coff1[i] / coff0[i] for i in range(order0)]

    def deflate_root(self, root: float) -> float:
        """Divide the polynomial by ``(u - root)`` in place.

        Elimination runs forward when root > 0.5 and backward otherwise, so
        each step divides by the larger of ``root`` and ``1 - root``.

        Returns:
            The division remainder: ``f(root) / root^n`` for forward
            elimination and ``f(root) / (1 - root)^n`` for backward, where n
            is the degree. Near zero if root really was a root.
        """
        order_a = self.order
        order_c = order_a - 1
        if order_a == 1:
            remainder = self.coffs[0]
            self.coffs = []
            return remainder
        if order_a < 1:
            self.coffs = []
            return 0.0

        pascal_a = pascal.get_row(order_a - 1)
        pascal_c = pascal.get_row(order_c - 1)
        coffs = self.coffs
        b0 = -root
        b1 = 1.0 - root

        # Scaled coefficients a'[i] = a[i]*C(n,i) and c'[i] = c[i]*C(n-1,i) satisfy
        # a'[i] = c'[i]*b0 + c'[i-1]*b1.
        if root > 0.5:
            c0 = coffs[0] / b0
            coffs[0] = c0
            for i in range(1, order_c):
                a1 = coffs[i] * pascal_a[i]
                c1 = (a1 - c0 * b1) / b0
                coffs[i] = c1 / pascal_c[i]
                c0 = c1
            remainder = coffs[order_a - 1] - c0 * b1
            del coffs[order_c:]
        else:
            c1 = coffs[order_a - 1] / b1
            coffs[order_a - 1] = c1
            for i in range(order_a - 2, 0, -1):
                a1 = coffs[i] * pascal_a[i]
                c0 = (a1 - c1 * b0) / b1
                coffs[i] = c0 / pascal_c[i - 1]
                c1 = c0
            remainder = coffs[0] - c1 * b0
            del coffs[0]
        return remainder

    def run_newton(
        self,
        start_fraction: float,
        tolerance: float | None = None,
        config: NewtonConfig | None = None,
    ) -> float | None:
        """Run Newton iteration on this polynomial from ``start_fraction``.

        Convergence needs two successive steps below ``tolerance``; the second
        step normally brings the result to full precision, so 10 to 12 digits
        is an appropriate tolerance.

        Args:
            start_fraction: Starting parameter
            tolerance: Step tolerance; defaults to ``config.bezier_step_tolerance``
            config: Source of the ``bezier_*`` iteration budget and divergence guard

        Returns:
            The converged parameter, or None if the iteration diverged, hit a
            flat derivative, or ran out of iterations.
        """
        settings = config or _NEWTON_DEFAULTS
        iteration = bezier_iteration_config(settings)
        if tolerance is not None and tolerance != iteration.step_size_tolerance:
            iteration = iteration.model_copy(update={"step_size_tolerance": tolerance})
        evaluator = _BezierNewtonEvaluator(self.coffs, settings.bezier_big_step)
        newton = Newton1dUnbounded(evaluator, iteration)
        newton.set_x(start_fraction)
        if newton.run_iterations():
            return newton.get_x()
        return None

    @staticmethod
    def deflate_roots_01(
        bezier: "UnivariateBezier", config: NewtonConfig | None = None
    ) -> list[float]:
        """Extract roots in [0, 1] by repeated Newton refinement and deflation.

        Each pass looks for a sign change between adjacent coefficients, starts
        Newton at the matching fraction, and on success divides that root out.
        An exactly zero leading coefficient is a root at 0 and is deflated
        directly. The search stops when the order reaches 1 or no crossing
        yields a converged root.

        Roots of even multiplicity do not produce a sign change and can be
        missed.

        Args:
            bezier: Polynomial to consume; it is deflated in place.
            config: Newton settings passed to run_newton

        Returns:
            Ascending roots found.
        """
        roots: list[float] = []
        while bezier.order > 1:
            order = bezier.order
            coffs = bezier.coffs
            if coffs[0] == 0.0:
                bezier.deflate_left()
                roots.append(0.0)
                continue
            found = False
            for i in range(1, order):
                a0 = coffs[i - 1]
                a1 = coffs[i]
                if a0 * a1 > 0.0:
                    continue
                segment_fraction = Order2Bezier.solve_coffs(a0, a1)
                if segment_fraction is None:
                    # both coefficients zero
                    continue
                global_start_fraction = (i - 1 + segment_fraction) / (order - 1)
                newton_fraction = bezier.run_newton(
                    global_start_fraction, DEFLATION_NEWTON_TOLERANCE, config
                )
                if newton_fraction is None:
                    logger.debug(
                        "No convergence from crossing (order=%d, start=%r)",
                        order,
                        global_start_fraction,
                    )
                    continue
                roots.append(newton_fraction)
                remainder = bezier.deflate_root(newton_fraction)
                logger.debug(
                    "Deflated root %r (order=%d, remainder=%r)",
                    newton_fraction,
                    order,
                    remainder,
                )
                found = True
                break
            if not found:
                break
        return sorted(roots)


def create_bezier(coffs: Sequence[float]) -> BezierCoffs:
    """Create the most specialized Bezier class for the coefficient count.

    Raises:
        CoefficientError: If no coefficients are given
    """
    if not coffs:
        raise CoefficientError(coffs, "at least one coefficient is required")
    specialized: dict[int, type[BezierCoffs]] = {
        2: Order2Bezier,
        3: Order3Bezier,
        4: Order4Bezier,
        5: Order5Bezier,
    }
    cls = specialized.get(len(coffs))
    if cls is None:
        return UnivariateBezier(coffs)
    return cls.from_coffs(coffs)  # type: ignore[attr-defined]


def power_to_bezier(coffs: Sequence[float]) -> list[float]:
    """Convert power-basis coefficients to Bezier coefficients of the same order.

    ``b[j] = sum_{i<=j} C(j, i) / C(n, i) * c[i]`` for degree n.
    """
    n = len(coffs) - 1
    if n < 0:
        return []
    pascal_n = pascal.get_row(n)
    result = []
    for j in range(n + 1):
        pascal_j = pascal.get_row(j)
        result.append(sum(pascal_j[i] / pascal_n[i] * coffs[i] for i in range(j + 1)))
    return result


def bezier_to_power(coffs: Sequence[float]) -> list[float]:
    """Convert Bezier coefficients to power-basis coefficients of the same order.

    ``c[i] = C(n, i) * sum_{j<=i} (-1)^(i-j) C(i, j) * b[j]`` for degree n.
    """
    n = len(coffs) - 1
    if n < 0:
        return []
    pascal_n = pascal.get_row(n)
    result = []
    for i in range(n + 1):
        pascal_i = pascal.get_row(i)
        total = 0.0
        for j in range(i + 1):
            sign = -1.0 if (i - j) % 2 else 1.0
            total += sign * pascal_i[j] * coffs[j]
        result.append(pascal_n[i] * total)
    return result

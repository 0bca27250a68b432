"""Settings-driven entry point over the root-finding kernel.

This module coordinates the closed-form solvers, the Bezier deflation solver
and the trigonometric solvers behind one object that validates input, logs
each request and keeps solve statistics.

Key components:
- RootSolver: Facade used by the CLI and by callers that want validation
- PowerNewtonEvaluator: Newton evaluator for a power-basis polynomial
"""

import math
import time
from collections.abc import Sequence

from rootkernel.config import KernelSettings
from rootkernel.core import analytic, pascal, power, trig
from rootkernel.core.bezier import UnivariateBezier, create_bezier, power_to_bezier
from rootkernel.core.newton import Newton1dUnbounded, NewtonEvaluatorRtoRD
from rootkernel.domain import TrigSolution
from rootkernel.exceptions import CoefficientError, RootKernelError, UnsupportedDegreeError
from rootkernel.utils import SolveLogger, SolveStats

ANALYTIC_MAX_DEGREE = 4


class PowerNewtonEvaluator(NewtonEvaluatorRtoRD):
    """Value and derivative of a power-basis polynomial."""

    def __init__(self, coffs: Sequence[float]) -> None:
        super().__init__()
        self._coffs = list(coffs)

    def evaluate(self, x: float) -> bool:
        self.current_f = power.evaluate(self._coffs, x)
        self.current_dfdx = power.evaluate_derivative(self._coffs, x)
        return True


def _validate(coffs: Sequence[float]) -> list[float]:
    if len(coffs) == 0:
        raise CoefficientError(coffs, "at least one coefficient is required")
    values = [float(c) for c in coffs]
    if not all(math.isfinite(c) for c in values):
        raise CoefficientError(values, "coefficients must be finite")
    return values


class RootSolver:
    """Validating, logging facade over the kernel's solvers.

    Polynomials of degree at most 4 are solved in closed form. Higher degrees
    are solved on a finite interval by mapping it to [0, 1], converting to
    Bezier form and extracting roots by deflation.

    Example:
        solver = RootSolver()
        roots = solver.solve([-2.0, 0.0, 1.0])
        stats = solver.stats
    """

    def __init__(
        self,
        settings: KernelSettings | None = None,
        logger: SolveLogger | None = None,
    ) -> None:
        """Initialize solver.

        Args:
            settings: Kernel settings (defaults used if None)
            logger: Solve logger (a new one is created if None)
        """
        self.settings = settings or KernelSettings()
        self.logger = logger or SolveLogger()

    @property
    def stats(self) -> SolveStats:
        return self.logger.stats

    def solve(self, coffs: Sequence[float], lower: float = 0.0, upper: float = 1.0) -> list[float]:
        """Return the ascending real roots of a power-basis polynomial.

        Args:
            coffs: Power-basis coefficients, ``coffs[i]`` multiplying ``x^i``
            lower: Start of the search interval (degree above 4 only)
            upper: End of the search interval (degree above 4 only)

        Returns:
            Ascending roots; empty for constant polynomials and when no real
            root exists.

        Raises:
            CoefficientError: If coffs is empty or not finite
            UnsupportedDegreeError: If an interval solve gets an empty interval
                or a degree past the Pascal table
        """
        start = time.time()
        try:
            values = _validate(coffs)
            self.logger.log_solve_start("power", values)
            degree = power.effective_degree(values)
            if degree <= 0:
                roots: list[float] = []
            elif degree <= ANALYTIC_MAX_DEGREE:
                roots = analytic.polynomial_roots(values[: degree + 1])
            else:
                roots = self._solve_on_interval(values[: degree + 1], degree, lower, upper)
        except RootKernelError as e:
            self.logger.log_solve_error("power", e)
            raise
        self.logger.log_solve_complete("power", roots, (time.time() - start) * 1000)
        return roots

    def _solve_on_interval(
        self, coffs: list[float], degree: int, lower: float, upper: float
    ) -> list[float]:
        if not upper > lower:
            raise UnsupportedDegreeError(degree, f"empty interval [{lower}, {upper}]")
        if degree > pascal.MAX_SAFE_ROW:
            raise UnsupportedDegreeError(degree, f"degree exceeds {pascal.MAX_SAFE_ROW}")
        width = upper - lower
        mapped = power.compose_linear(coffs, lower, width)
        bezier = UnivariateBezier(power_to_bezier(mapped))
        fractions = UnivariateBezier.deflate_roots_01(bezier, self.settings.newton)
        return [lower + width * s for s in fractions]

    def solve_bezier(
        self,
        coffs: Sequence[float],
        target: float = 0.0,
        restrict_to_01: bool = True,
    ) -> list[float]:
        """Return parameters where a Bezier-basis polynomial equals ``target``.

        Raises:
            CoefficientError: If coffs is empty or not finite
        """
        start = time.time()
        try:
            values = _validate(coffs)
            self.logger.log_solve_start("bezier", values)
            if len(values) > pascal.MAX_SAFE_ROW + 1:
                raise UnsupportedDegreeError(
                    len(values) - 1, f"degree exceeds {pascal.MAX_SAFE_ROW}"
                )
            bezier = create_bezier(values)
            roots = sorted(bezier.roots(target, restrict_to_01, self.settings.newton) or [])
        except RootKernelError as e:
            self.logger.log_solve_error("bezier", e)
            raise
        self.logger.log_solve_complete("bezier", roots, (time.time() - start) * 1000)
        return roots

    def refine_root(self, coffs: Sequence[float], start: float) -> float | None:
        """Polish an approximate root of a power-basis polynomial with Newton iteration.

        Returns:
            The converged root, or None if the iteration did not converge.
        """
        values = _validate(coffs)
        newton = Newton1dUnbounded(PowerNewtonEvaluator(values), self.settings.newton)
        newton.set_x(start)
        if newton.run_iterations():
            return newton.get_x()
        self.logger.log_newton_failure("power", start)
        return None

    def circle_ellipse(
        self,
        center: tuple[float, float],
        vector_u: tuple[float, float],
        vector_v: tuple[float, float],
    ) -> list[tuple[TrigSolution, TrigSolution]]:
        """Intersect the unit circle with the ellipse ``center + u*cos + v*sin``.

        Returns:
            Pairs of (ellipse parameter, circle angle) solutions.
        """
        start = time.time()
        values = _validate([*center, *vector_u, *vector_v])
        self.logger.log_solve_start("circle-ellipse", values)
        ellipse_radians: list[float] = []
        circle_radians: list[float] = []
        trig.solve_unit_circle_ellipse_intersection(
            *values, ellipse_radians, circle_radians
        )
        pairs = list(
            zip(
                trig.trig_solutions(ellipse_radians),
                trig.trig_solutions(circle_radians),
                strict=True,
            )
        )
        self.logger.log_solve_complete(
            "circle-ellipse", ellipse_radians, (time.time() - start) * 1000
        )
        return pairs

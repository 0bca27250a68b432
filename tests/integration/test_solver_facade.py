"""Integration tests for the RootSolver facade."""

import logging
import math

import pytest

from rootkernel.config import KernelSettings, NewtonConfig
from rootkernel.core import RootSolver
from rootkernel.exceptions import CoefficientError, RootKernelError, UnsupportedDegreeError

# (x - 0.1)(x - 0.3)(x - 0.5)(x - 0.7)(x - 0.9)
QUINTIC = [-0.00945, 0.1689, -0.95, 2.3, -2.5, 1.0]
QUINTIC_ROOTS = [0.1, 0.3, 0.5, 0.7, 0.9]


@pytest.fixture
def solver():
    return RootSolver()


class TestSolve:
    """Tests for power-basis solving."""

    def test_quadratic(self, solver):
        assert solver.solve([-2.0, 0.0, 1.0]) == [
            pytest.approx(-math.sqrt(2.0)),
            pytest.approx(math.sqrt(2.0)),
        ]

    def test_low_degree_ignores_interval(self, solver):
        assert solver.solve([-1.0, 0.0, 0.0, 0.0, 1.0], lower=5.0, upper=6.0) == [
            pytest.approx(-1.0),
            pytest.approx(1.0),
        ]

    def test_trailing_zeros_trimmed(self, solver):
        assert solver.solve([-3.0, 1.0, 0.0, 0.0]) == [pytest.approx(3.0)]

    @pytest.mark.parametrize("coffs", [[5.0], [0.0, 0.0]])
    def test_constant(self, solver, coffs):
        assert solver.solve(coffs) == []
        assert solver.stats.empty_count == 1

    def test_quintic_on_unit_interval(self, solver):
        roots = solver.solve(QUINTIC)
        assert roots == [pytest.approx(r, abs=1e-9) for r in QUINTIC_ROOTS]

    def test_quintic_on_wider_interval(self, solver):
        roots = solver.solve(QUINTIC, lower=0.0, upper=2.0)
        assert roots == [pytest.approx(r, abs=1e-9) for r in QUINTIC_ROOTS]

    def test_stats(self, solver):
        solver.solve([-2.0, 0.0, 1.0])
        solver.solve([1.0, 0.0, 1.0])
        stats = solver.stats
        assert stats.solve_count == 2
        assert stats.roots_found == 2
        assert stats.empty_count == 1
        assert stats.duration_seconds >= 0.0


class TestErrors:
    """Malformed requests raise and are counted."""

    def test_empty(self, solver):
        with pytest.raises(CoefficientError):
            solver.solve([])
        assert solver.stats.error_count == 1
        assert solver.stats.errors[0][0] == "power"

    def test_not_finite(self, solver):
        with pytest.raises(CoefficientError) as exc_info:
            solver.solve([1.0, math.inf])
        assert "finite" in exc_info.value.reason

    def test_inverted_interval(self, solver):
        with pytest.raises(UnsupportedDegreeError) as exc_info:
            solver.solve(QUINTIC, lower=1.0, upper=0.0)
        assert exc_info.value.degree == 5

    def test_degree_past_pascal_table(self, solver):
        with pytest.raises(UnsupportedDegreeError):
            solver.solve([1.0] * 62)

    def test_bezier_too_long(self, solver):
        with pytest.raises(RootKernelError):
            solver.solve_bezier([1.0] * 62)

    def test_errors_are_logged(self, solver, caplog):
        caplog.set_level(logging.DEBUG, logger="rootkernel")
        with pytest.raises(CoefficientError):
            solver.solve_bezier([])
        assert any("Solve rejected" in record.getMessage() for record in caplog.records)


class TestBezierAndRefine:
    def test_solve_bezier(self, solver):
        assert solver.solve_bezier([1.0, -1.0]) == [pytest.approx(0.5)]

    def test_solve_bezier_unrestricted(self, solver):
        """1 - 2u + ... as Order2 from (1, 3) crosses 0 at u = -0.5."""
        assert solver.solve_bezier([1.0, 3.0]) == []
        assert solver.solve_bezier([1.0, 3.0], restrict_to_01=False) == [pytest.approx(-0.5)]

    def test_solve_bezier_logs(self, solver, caplog):
        caplog.set_level(logging.DEBUG, logger="rootkernel")
        solver.solve_bezier([1.0, -1.0])
        messages = [record.getMessage() for record in caplog.records]
        assert any("Solve complete" in m for m in messages)

    def test_refine_root(self, solver):
        assert solver.refine_root([-2.0, 0.0, 1.0], 1.0) == pytest.approx(math.sqrt(2.0))

    def test_refine_root_failure(self, solver):
        assert solver.refine_root([1.0, 0.0, 1.0], 0.0) is None
        assert solver.stats.newton_failures == 1

    def test_refine_uses_settings(self):
        solver = RootSolver(KernelSettings(newton=NewtonConfig(max_iterations=1)))
        assert solver.refine_root([-2.0, 0.0, 1.0], 1.0) is None

    def test_solve_bezier_flat_control_segment(self, solver):
        assert solver.solve_bezier([1.0, 0.0, 0.0, 0.0, 0.0, 1.0]) == []
        assert solver.solve_bezier([1.0, 0.0, 0.0, 1.0], restrict_to_01=False) == []

    def test_bezier_budget_from_settings(self):
        solver = RootSolver(KernelSettings(newton=NewtonConfig(bezier_max_iterations=1)))
        assert solver.solve(QUINTIC) == []
        bezier_coffs = [1.0, -1.0, 1.0, -1.0, 1.0, -1.0]
        assert solver.solve_bezier(bezier_coffs) == []
        assert RootSolver().solve_bezier(bezier_coffs) != []


class TestCircleEllipse:
    def test_four_intersections(self, solver):
        pairs = solver.circle_ellipse((0.0, 0.0), (2.0, 0.0), (0.0, 0.5))
        assert len(pairs) == 4
        for ellipse, circle in pairs:
            x = 2.0 * ellipse.cos
            y = 0.5 * ellipse.sin
            assert x == pytest.approx(circle.cos)
            assert y == pytest.approx(circle.sin)
        assert solver.stats.roots_found == 4

    def test_no_intersection(self, solver):
        assert solver.circle_ellipse((5.0, 5.0), (1.0, 0.0), (0.0, 1.0)) == []

"""Unit tests for trigonometric root conversion.

Tests cover:
- Angle recovery from the rational circle parametrization
- Unit circle intersections with quadrics and ellipses
- Line / unit circle classification codes
"""

import math

import pytest

from rootkernel.core import power, trig
from rootkernel.domain import LineCircleSolutionType


def ellipse_point(theta, cx, cy, ux, uy, vx, vy):
    c = math.cos(theta)
    s = math.sin(theta)
    return cx + ux * c + vx * s, cy + uy * c + vy * s


class TestConversionVectors:
    """The fixed products must match C, S and W."""

    @pytest.mark.parametrize("t", [-1.5, 0.0, 0.3, 2.0])
    def test_products(self, t):
        c = power.evaluate(trig.C, t)
        s = power.evaluate(trig.S, t)
        w = power.evaluate(trig.W, t)
        assert power.evaluate(trig.CW, t) == pytest.approx(c * w)
        assert power.evaluate(trig.SW, t) == pytest.approx(s * w)
        assert power.evaluate(trig.SC, t) == pytest.approx(s * c)
        assert power.evaluate(trig.SS, t) == pytest.approx(s * s)
        assert power.evaluate(trig.CC, t) == pytest.approx(c * c)
        assert power.evaluate(trig.WW, t) == pytest.approx(w * w)
        assert power.evaluate(trig.CC_MINUS_SS, t) == pytest.approx(c * c - s * s)

    @pytest.mark.parametrize("t", [-3.0, 0.0, 0.25, 1.0, 4.0])
    def test_parametrization_is_on_unit_circle(self, t):
        c = power.evaluate(trig.C, t)
        s = power.evaluate(trig.S, t)
        w = power.evaluate(trig.W, t)
        assert c * c + s * s == pytest.approx(w * w)


class TestSolveAngles:
    """Tests for solve_angles."""

    def test_all_zero_equation(self):
        radians = []
        assert not trig.solve_angles([0.0, 0.0, 0.0], 2, 0.0, radians)
        assert radians == []

    def test_degree_drop_adds_angle_at_infinity(self):
        """cos(theta) = 0 loses its t^2 term; -pi/2 is the root at infinity."""
        radians = []
        assert trig.solve_unit_circle_implicit_quadric_intersection(
            0.0, 0.0, 0.0, 1.0, 0.0, 0.0, radians
        )
        assert sorted(radians) == [pytest.approx(-math.pi / 2), pytest.approx(math.pi / 2)]

    def test_sine_equation(self):
        radians = []
        assert trig.solve_unit_circle_implicit_quadric_intersection(
            0.0, 0.0, 0.0, 0.0, 1.0, -0.5, radians
        )
        assert sorted(radians) == [pytest.approx(math.pi / 6), pytest.approx(5 * math.pi / 6)]

    def test_no_solution(self):
        """cos(theta) = 2 has no solution."""
        radians = []
        assert not trig.solve_unit_circle_implicit_quadric_intersection(
            0.0, 0.0, 0.0, 1.0, 0.0, -2.0, radians
        )
        assert radians == []

    def test_appends_to_existing(self):
        radians = [99.0]
        trig.solve_unit_circle_implicit_quadric_intersection(0.0, 0.0, 0.0, 0.0, 1.0, -0.5, radians)
        assert radians[0] == 99.0
        assert len(radians) == 3


class TestQuadricIntersection:
    """Tests for the degree 4 substitution."""

    def test_hyperbola(self):
        """x^2 - y^2 = 0 meets the unit circle at the four diagonals."""
        radians = []
        assert trig.solve_unit_circle_implicit_quadric_intersection(
            1.0, 0.0, -1.0, 0.0, 0.0, 0.0, radians
        )
        assert len(radians) == 4
        for theta in radians:
            assert abs(math.cos(theta)) == pytest.approx(abs(math.sin(theta)))


class TestEllipseIntersection:
    """Tests for unit circle / ellipse intersection."""

    def test_four_crossings(self):
        args = (0.0, 0.0, 2.0, 0.0, 0.0, 0.5)
        ellipse_radians = []
        circle_radians = []
        assert trig.solve_unit_circle_ellipse_intersection(*args, ellipse_radians, circle_radians)
        assert len(ellipse_radians) == 4
        assert len(circle_radians) == 4
        for theta, phi in zip(ellipse_radians, circle_radians, strict=True):
            x, y = ellipse_point(theta, *args)
            assert x * x + y * y == pytest.approx(1.0)
            assert x == pytest.approx(math.cos(phi))
            assert y == pytest.approx(math.sin(phi))

    def test_offset_circle(self):
        """Unit circle shifted by 1 in x crosses at (1/2, +-sqrt(3)/2)."""
        args = (1.0, 0.0, 1.0, 0.0, 0.0, 1.0)
        ellipse_radians = []
        circle_radians = []
        assert trig.solve_unit_circle_ellipse_intersection(*args, ellipse_radians, circle_radians)
        assert sorted(circle_radians) == [
            pytest.approx(-math.pi / 3),
            pytest.approx(math.pi / 3),
        ]

    def test_ellipse_inside_circle(self):
        ellipse_radians = []
        circle_radians = []
        assert not trig.solve_unit_circle_ellipse_intersection(
            0.0, 0.0, 0.5, 0.0, 0.0, 0.3, ellipse_radians, circle_radians
        )
        assert ellipse_radians == []
        assert circle_radians == []

    def test_coincident_circle(self):
        """Every angle solves it, which is reported as failure."""
        ellipse_radians = []
        circle_radians = []
        assert not trig.solve_unit_circle_ellipse_intersection(
            0.0, 0.0, 1.0, 0.0, 0.0, 1.0, ellipse_radians, circle_radians
        )
        assert ellipse_radians == []

    def test_homogeneous_with_unit_weight_matches(self):
        cartesian = ([], [])
        homogeneous = ([], [])
        trig.solve_unit_circle_ellipse_intersection(0.2, 0.1, 1.5, 0.0, 0.3, 0.8, *cartesian)
        trig.solve_unit_circle_homogeneous_ellipse_intersection(
            0.2, 0.1, 1.0, 1.5, 0.0, 0.0, 0.3, 0.8, 0.0, *homogeneous
        )
        assert sorted(homogeneous[0]) == pytest.approx(sorted(cartesian[0]))
        assert sorted(homogeneous[1]) == pytest.approx(sorted(cartesian[1]))

    def test_homogeneous_scaled_weight(self):
        """Scaling all of x, y, w by 2 describes the same ellipse."""
        cartesian = ([], [])
        homogeneous = ([], [])
        trig.solve_unit_circle_ellipse_intersection(0.0, 0.0, 2.0, 0.0, 0.0, 0.5, *cartesian)
        trig.solve_unit_circle_homogeneous_ellipse_intersection(
            0.0, 0.0, 2.0, 4.0, 0.0, 0.0, 0.0, 1.0, 0.0, *homogeneous
        )
        assert sorted(homogeneous[1]) == pytest.approx(sorted(cartesian[1]))


class TestLineCircleIntersection:
    """Tests for append_implicit_line_unit_circle_intersections."""

    def test_all_solutions(self):
        result = trig.append_implicit_line_unit_circle_intersections(0.0, 0.0, 0.0, [], [], [])
        assert result == LineCircleSolutionType.ALL_SOLUTIONS
        assert result == -2

    def test_no_line(self):
        cos_values = []
        result = trig.append_implicit_line_unit_circle_intersections(1.0, 0.0, 0.0, cos_values, [], [])
        assert result == LineCircleSolutionType.NO_LINE
        assert result == -1
        assert cos_values == []

    def test_two_intersections(self):
        cos_values, sin_values, radians = [], [], []
        result = trig.append_implicit_line_unit_circle_intersections(
            0.0, 1.0, 0.0, cos_values, sin_values, radians
        )
        assert result == LineCircleSolutionType.TWO_INTERSECTIONS
        assert cos_values == [pytest.approx(0.0), pytest.approx(0.0)]
        assert sin_values == [pytest.approx(1.0), pytest.approx(-1.0)]
        assert radians == [pytest.approx(math.pi / 2), pytest.approx(-math.pi / 2)]

    def test_diagonal_line(self):
        cos_values, sin_values = [], []
        result = trig.append_implicit_line_unit_circle_intersections(
            -0.5, 1.0, 1.0, cos_values, sin_values, None
        )
        assert result == LineCircleSolutionType.TWO_INTERSECTIONS
        for c, s in zip(cos_values, sin_values, strict=True):
            assert c * c + s * s == pytest.approx(1.0)
            assert -0.5 + c + s == pytest.approx(0.0, abs=1e-14)

    def test_tangent(self):
        cos_values, sin_values = [], []
        result = trig.append_implicit_line_unit_circle_intersections(
            -1.0, 1.0, 0.0, cos_values, sin_values, None
        )
        assert result == LineCircleSolutionType.TANGENT
        assert cos_values == [pytest.approx(1.0), pytest.approx(1.0)]
        assert sin_values == [pytest.approx(0.0), pytest.approx(0.0)]

    @pytest.mark.parametrize(("alpha", "line_x", "circle_x"), [(-2.0, 2.0, 1.0), (2.0, -2.0, -1.0)])
    def test_no_intersection_reports_closest_points(self, alpha, line_x, circle_x):
        cos_values, sin_values = [], []
        result = trig.append_implicit_line_unit_circle_intersections(
            alpha, 1.0, 0.0, cos_values, sin_values, None
        )
        assert result == LineCircleSolutionType.NO_INTERSECTION
        assert cos_values == [pytest.approx(line_x), pytest.approx(circle_x)]
        assert sin_values == [pytest.approx(0.0), pytest.approx(0.0)]


class TestTrigSolutions:
    """Tests for trig_solutions."""

    def test_pairs_cos_sin(self):
        solutions = trig.trig_solutions([0.0, math.pi / 2])
        assert solutions[0].cos == pytest.approx(1.0)
        assert solutions[1].sin == pytest.approx(1.0)
        assert all(s.unit_error() < 1e-14 for s in solutions)

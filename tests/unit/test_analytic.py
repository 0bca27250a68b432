"""Unit tests for closed-form polynomial roots.

Tests cover:
- Linear and quadratic root appending (including unsorted pair order)
- Cubic branches (three real, one real, triple root)
- Quartic resolvent solve, degenerate leading coefficients, r = 0 branch
- Scalar helpers (cube root, safe divide, resolvent root selection)
"""

import pytest

from rootkernel.core.analytic import (
    append_cubic_roots,
    append_linear_root,
    append_quadratic_roots,
    append_quartic_roots,
    cbrt,
    check_root_proximity,
    cubic_roots,
    improve_roots,
    is_small_ratio,
    is_zero,
    most_distant_from_mean,
    newton_method_adjustment,
    polynomial_roots,
    quadratic_roots,
    quartic_roots,
    safe_divide,
    solve_quadratic,
)
from rootkernel.core import power
from rootkernel.domain import Degree3PowerPolynomial, Degree4PowerPolynomial


class TestScalarHelpers:
    """Tests for the small scalar helpers."""

    def test_is_zero(self):
        assert is_zero(1.0e-10)
        assert not is_zero(1.0e-8)

    def test_is_small_ratio(self):
        assert is_small_ratio(1.0e-10, 1.0)
        assert is_small_ratio(1.0e-5, 1.0e12)
        assert not is_small_ratio(1.0e-5, 1.0)

    @pytest.mark.parametrize(
        ("x", "expected"),
        [(8.0, 2.0), (-27.0, -3.0), (0.0, 0.0), (0.001, 0.1)],
    )
    def test_cbrt(self, x, expected):
        assert cbrt(x) == pytest.approx(expected)

    def test_safe_divide(self):
        assert safe_divide(1.0, 4.0) == (True, 0.25)
        assert safe_divide(1.0, 0.0, default=7.0) == (False, 7.0)
        assert safe_divide(1.0, 1.0e-15)[0] is False

    def test_most_distant_from_mean(self):
        assert most_distant_from_mean([1.0, 2.0, 10.0]) == 10.0
        assert most_distant_from_mean([-5.0, 1.0, 2.0]) == -5.0
        assert most_distant_from_mean([]) == 0.0

    def test_check_root_proximity(self):
        assert check_root_proximity([1.0, 2.0, 3.0], 1)
        assert not check_root_proximity([1.0, 3.5, 3.0], 1)
        assert check_root_proximity([4.0], 0)

    def test_newton_adjustment_flat_derivative(self):
        """x^2 at 0 has zero slope."""
        assert newton_method_adjustment([0.0, 0.0, 1.0], 0.0, 2) is None

    def test_newton_adjustment_step(self):
        step = newton_method_adjustment([-2.0, 0.0, 1.0], 1.0, 2)
        assert step == pytest.approx(-0.5)


class TestLinearAndQuadratic:
    """Tests for linear and quadratic roots."""

    def test_linear_root(self):
        roots = []
        append_linear_root(-3.0, 1.5, roots)
        assert roots == [pytest.approx(2.0)]

    def test_linear_no_root_for_flat_line(self):
        roots = []
        append_linear_root(1.0, 0.0, roots)
        assert roots == []

    def test_quadratic_two_roots_unsorted(self):
        """The pair comes back as sqrt(D) - p then -sqrt(D) - p."""
        roots = []
        append_quadratic_roots([-2.0, 0.0, 1.0], roots)
        assert roots == [pytest.approx(2.0**0.5), pytest.approx(-(2.0**0.5))]

    def test_quadratic_appends_after_existing(self):
        roots = [100.0]
        append_quadratic_roots([2.0, -3.0, 1.0], roots)
        assert roots[0] == 100.0
        assert sorted(roots[1:]) == [pytest.approx(1.0), pytest.approx(2.0)]

    def test_quadratic_double_root(self):
        roots = []
        append_quadratic_roots([1.0, -2.0, 1.0], roots)
        assert roots == [pytest.approx(1.0)]

    def test_quadratic_no_real_roots(self):
        roots = []
        append_quadratic_roots([1.0, 0.0, 1.0], roots)
        assert roots == []

    def test_quadratic_degrades_to_linear(self):
        roots = []
        append_quadratic_roots([2.0, -1.0, 0.0], roots)
        assert roots == [pytest.approx(2.0)]

    def test_quadratic_roots_sorted(self):
        assert quadratic_roots([-2.0, 0.0, 1.0]) == [
            pytest.approx(-(2.0**0.5)),
            pytest.approx(2.0**0.5),
        ]

    def test_solve_quadratic(self):
        assert solve_quadratic(1.0, 0.0, -4.0) == [pytest.approx(-2.0), pytest.approx(2.0)]
        assert solve_quadratic(1.0, -2.0, 1.0) == [1.0, 1.0]
        assert solve_quadratic(1.0, 0.0, 4.0) is None
        assert solve_quadratic(0.0, 2.0, -1.0) == [pytest.approx(0.5)]
        assert solve_quadratic(0.0, 0.0, 1.0) is None


class TestCubic:
    """Tests for cubic roots."""

    @pytest.mark.parametrize(
        "expected",
        [(1.0, 2.0, 3.0), (-4.0, 0.5, 7.25), (-1.0, 0.0, 1.0)],
    )
    def test_three_real_roots(self, expected):
        cubic = Degree3PowerPolynomial.from_roots(*expected)
        roots = cubic_roots(cubic.coffs)
        assert roots == [pytest.approx(r, abs=1e-10) for r in expected]

    def test_scaled_leading_coefficient(self):
        cubic = Degree3PowerPolynomial.from_roots(-2.0, 1.0, 5.0, c3=-3.5)
        roots = cubic_roots(cubic.coffs)
        assert roots == [pytest.approx(r, abs=1e-10) for r in (-2.0, 1.0, 5.0)]

    def test_one_real_root(self):
        assert cubic_roots([-1.0, 0.0, 0.0, 1.0]) == [pytest.approx(1.0)]

    def test_triple_root(self):
        cubic = Degree3PowerPolynomial.from_roots(2.0, 2.0, 2.0)
        roots = cubic_roots(cubic.coffs)
        assert len(roots) == 3
        assert all(r == pytest.approx(2.0, abs=1e-6) for r in roots)

    def test_single_and_double_root(self):
        cubic = Degree3PowerPolynomial.from_roots(-1.0, 2.0, 2.0)
        roots = cubic_roots(cubic.coffs)
        assert roots == [pytest.approx(r, abs=1e-6) for r in (-1.0, 2.0, 2.0)]

    def test_degrades_to_quadratic(self):
        roots = []
        append_cubic_roots([-4.0, 0.0, 1.0, 0.0], roots)
        assert roots == [pytest.approx(-2.0), pytest.approx(2.0)]

    def test_residuals_are_small(self):
        coffs = [0.3, -2.1, 0.4, 1.7]
        for root in cubic_roots(coffs):
            assert abs(power.evaluate(coffs, root)) < 1e-12


class TestQuartic:
    """Tests for quartic roots."""

    @pytest.mark.parametrize(
        "expected",
        [(-2.0, -1.0, 1.0, 3.0), (0.1, 0.4, 0.6, 0.9), (-10.0, -3.0, 2.0, 8.0)],
    )
    def test_four_real_roots(self, expected):
        quartic = Degree4PowerPolynomial.from_roots(*expected)
        roots = quartic_roots(quartic.coffs)
        assert roots == [pytest.approx(r, abs=1e-9) for r in expected]

    def test_two_real_roots(self):
        """(x^2 - 1)(x^2 + 1) has only the roots -1 and 1."""
        roots = quartic_roots([-1.0, 0.0, 0.0, 0.0, 1.0])
        assert roots == [pytest.approx(-1.0), pytest.approx(1.0)]

    def test_no_real_roots(self):
        assert quartic_roots([1.0, 0.0, 0.0, 0.0, 1.0]) == []

    def test_zero_absolute_term(self):
        """x^4 - x^2 factors out y = 0 in the depressed form."""
        roots = quartic_roots([0.0, 0.0, -1.0, 0.0, 1.0])
        assert roots == [pytest.approx(r, abs=1e-12) for r in (-1.0, 0.0, 0.0, 1.0)]

    def test_degrades_to_cubic(self):
        roots = []
        append_quartic_roots([-6.0, 11.0, -6.0, 1.0, 0.0], roots)
        assert roots == [pytest.approx(r) for r in (1.0, 2.0, 3.0)]

    def test_results_sorted(self):
        quartic = Degree4PowerPolynomial.from_roots(3.0, -1.0, 1.0, -2.0)
        roots = quartic_roots(quartic.coffs)
        assert roots == sorted(roots)


class TestImproveRoots:
    """Tests for Newton polishing of closed-form roots."""

    def test_polish_moves_toward_root(self):
        roots = [1.4]
        improve_roots([-2.0, 0.0, 1.0], 2, roots, False)
        assert roots[0] == pytest.approx(2.0**0.5, abs=1e-14)

    def test_restricted_polish_reverts_crossing(self):
        """A polish step that jumps past a neighbor is undone."""
        coffs = [-2.0, 0.0, 1.0]
        roots = [-1.0, -0.9]
        improve_roots(coffs, 2, roots, True)
        assert roots[1] == -0.9


class TestPolynomialRoots:
    """Tests for degree dispatch."""

    def test_dispatch_by_length(self):
        assert polynomial_roots([-3.0, 1.0]) == [pytest.approx(3.0)]
        assert polynomial_roots([2.0, -3.0, 1.0]) == [pytest.approx(1.0), pytest.approx(2.0)]
        assert polynomial_roots([5.0]) == []

    def test_too_many_coefficients(self):
        with pytest.raises(ValueError):
            polynomial_roots([1.0] * 6)

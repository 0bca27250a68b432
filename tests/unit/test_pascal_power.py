"""Unit tests for the Pascal table and power-basis utilities."""

import math

import pytest

from rootkernel.core import pascal, power
from rootkernel.exceptions import PascalRowError


class TestPascalTable:
    """Tests for Pascal rows."""

    @pytest.mark.parametrize("row", [0, 1, 2, 5, 17, 33, 60])
    def test_row_matches_binomials(self, row):
        assert pascal.get_row(row) == tuple(float(math.comb(row, k)) for k in range(row + 1))

    def test_row_is_immutable(self):
        assert isinstance(pascal.get_row(4), tuple)

    @pytest.mark.parametrize("row", [-1, pascal.MAX_SAFE_ROW + 1, 200])
    def test_unsafe_rows_raise(self, row):
        with pytest.raises(PascalRowError) as exc_info:
            pascal.get_row(row)
        assert exc_info.value.row == row
        assert exc_info.value.max_row == pascal.MAX_SAFE_ROW


class TestBernsteinBasis:
    """Tests for Bernstein basis evaluation."""

    @pytest.mark.parametrize("order", [1, 2, 3, 4, 5, 8, 12])
    @pytest.mark.parametrize("u", [-0.5, 0.0, 0.3, 0.5, 1.0, 1.7])
    def test_partition_of_unity(self, order, u):
        assert sum(pascal.bezier_basis_values(order, u)) == pytest.approx(1.0)

    def test_cubic_values(self):
        u = 0.25
        v = 0.75
        assert pascal.bezier_basis_values(4, u) == pytest.approx(
            [v**3, 3 * u * v * v, 3 * u * u * v, u**3]
        )

    def test_endpoints(self):
        assert pascal.bezier_basis_values(5, 0.0) == [1.0, 0.0, 0.0, 0.0, 0.0]
        assert pascal.bezier_basis_values(5, 1.0) == [0.0, 0.0, 0.0, 0.0, 1.0]

    @pytest.mark.parametrize("order", [2, 3, 6])
    def test_derivatives_sum_to_zero(self, order):
        assert sum(pascal.bezier_basis_derivatives(order, 0.4)) == pytest.approx(0.0, abs=1e-14)

    def test_quadratic_derivatives(self):
        u = 0.2
        assert pascal.bezier_basis_derivatives(3, u) == pytest.approx(
            [-2 * (1 - u), 2 - 4 * u, 2 * u]
        )

    def test_empty_order(self):
        assert pascal.bezier_basis_values(0, 0.5) == []
        assert pascal.bezier_basis_derivatives(1, 0.5) == [0.0]


class TestPowerPolynomial:
    """Tests for power-basis helpers."""

    def test_evaluate(self):
        assert power.evaluate([-2.0, 0.0, 1.0], 3.0) == 7.0
        assert power.evaluate([], 3.0) == 0.0

    def test_degree_known_evaluate_ignores_tail(self):
        assert power.degree_known_evaluate([1.0, 2.0, 99.0], 1, 2.0) == 5.0

    def test_evaluate_derivative(self):
        assert power.evaluate_derivative([5.0, -1.0, 0.0, 2.0], 2.0) == 23.0
        assert power.evaluate_derivative([5.0], 2.0) == 0.0

    def test_effective_degree(self):
        assert power.effective_degree([1.0, 2.0, 0.0, 0.0]) == 1
        assert power.effective_degree([0.0, 0.0]) == -1

    def test_accumulate_returns_new_list(self):
        p = [1.0, 1.0]
        result = power.accumulate(p, [0.0, 1.0, 2.0], 3.0)
        assert result == [1.0, 4.0, 6.0]
        assert p == [1.0, 1.0]

    def test_zero_and_add_constant(self):
        assert power.zero(3) == [0.0, 0.0, 0.0]
        assert power.add_constant([1.0, 2.0], 0.5) == [1.5, 2.5]

    def test_compose_linear(self):
        assert power.compose_linear([0.0, 0.0, 1.0], 1.0, 2.0) == [1.0, 4.0, 4.0]

    def test_compose_linear_matches_substitution(self):
        coffs = [0.5, -1.0, 2.0, 0.25]
        mapped = power.compose_linear(coffs, -3.0, 0.5)
        for s in (0.0, 0.3, 1.0, 2.5):
            assert power.evaluate(mapped, s) == pytest.approx(power.evaluate(coffs, -3.0 + 0.5 * s))

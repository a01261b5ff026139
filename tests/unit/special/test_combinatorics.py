from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest

import probcalc.special.combinatorics as combinatorics_module
from probcalc.errors import DomainError
from probcalc.special.combinatorics import (
    CombinationStrategy,
    combinations,
    factorial,
    is_integral,
    log_factorial,
    select_combination_strategy,
)


class TestFactorial:
    @pytest.mark.parametrize("n, expected", [(0, 1.0), (1, 1.0), (5, 120.0), (10, 3628800.0)])
    def test_small_values(self, n: int, expected: float) -> None:
        assert factorial(n) == expected

    def test_integral_float_is_accepted(self) -> None:
        assert factorial(5.0) == 120.0
        assert factorial(np.int64(6)) == 720.0

    def test_largest_finite_value(self) -> None:
        assert math.isfinite(factorial(170))
        assert factorial(170) == pytest.approx(float(math.factorial(170)), rel=1e-12)

    @pytest.mark.parametrize("n", [171, 500, 10**6])
    def test_overflow_returns_infinity(self, n: int) -> None:
        assert factorial(n) == math.inf

    def test_negative_argument_raises(self) -> None:
        with pytest.raises(DomainError, match="negative"):
            factorial(-1)

    def test_domain_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            factorial(-3)

    @pytest.mark.parametrize("n", [2.5, math.nan, math.inf])
    def test_non_integer_argument_raises(self, n: float) -> None:
        with pytest.raises(DomainError):
            factorial(n)


class TestLogFactorial:
    @pytest.mark.parametrize("n", [0, 1])
    def test_trivial_values(self, n: int) -> None:
        assert log_factorial(n) == 0.0

    @pytest.mark.parametrize("n", [2, 10, 50, 200, 5000])
    def test_matches_log_gamma(self, n: int) -> None:
        assert log_factorial(n) == pytest.approx(math.lgamma(n + 1), rel=1e-12)

    @pytest.mark.parametrize("n", [-1, 2.5, math.nan])
    def test_invalid_argument_raises(self, n: float) -> None:
        with pytest.raises(DomainError):
            log_factorial(n)

    def test_memoization_does_not_change_values(self) -> None:
        expected = 0.0
        for i in range(2, 301):
            expected += math.log(i)

        first = log_factorial(300)
        log_factorial(2000)
        second = log_factorial(300)

        assert first == expected
        assert second == expected

    def test_table_growing_during_a_call_does_not_shift_the_sum(self, monkeypatch) -> None:
        prefix_sums = [0.0, 0.0]
        for i in range(2, 51):
            prefix_sums.append(prefix_sums[-1] + math.log(i))

        class ConcurrentlyExtendedTable(list):
            """Grows to 51 entries on its first read, as another caller would."""

            grown = False

            def __getitem__(self, index):
                if not self.grown:
                    self.grown = True
                    self.extend(prefix_sums[len(self) :])
                return super().__getitem__(index)

        table = ConcurrentlyExtendedTable([0.0, 0.0])
        monkeypatch.setattr(combinatorics_module, "_log_factorial_table", table)

        assert log_factorial(10) == prefix_sums[10]
        assert log_factorial(10) == pytest.approx(math.lgamma(11), rel=1e-12)
        assert len(table) == 51


class TestCombinations:
    @pytest.mark.parametrize(
        "n, k, expected",
        [
            (52, 5, 2598960),
            (0, 0, 1),
            (5, 7, 0),
            (5, -1, 0),
            (10, 3, 120),
            (10, 10, 1),
            (30, 15, 155117520),
            (40, 20, 137846528820),
        ],
    )
    def test_known_values(self, n: int, k: int, expected: int) -> None:
        assert combinations(n, k) == expected

    @pytest.mark.parametrize("n", range(30))
    def test_direct_strategy_is_exact(self, n: int) -> None:
        for k in range(n + 1):
            assert combinations(n, k) == math.comb(n, k)

    @pytest.mark.parametrize("n, k", [(60, 30), (100, 50), (1000, 3), (500, 250)])
    def test_log_strategy_is_accurate(self, n: int, k: int) -> None:
        assert combinations(n, k) == pytest.approx(float(math.comb(n, k)), rel=1e-9)

    @pytest.mark.parametrize("n", [0, 1, 7, 29, 30, 31, 64])
    def test_symmetry(self, n: int) -> None:
        for k in range(n + 1):
            assert combinations(n, k) == combinations(n, n - k)

    def test_overflow_returns_infinity(self) -> None:
        assert combinations(2000, 1000) == math.inf

    def test_non_integer_arguments_raise(self) -> None:
        with pytest.raises(DomainError):
            combinations(10, 2.5)

    def test_repeated_calls_are_identical(self) -> None:
        assert combinations(300, 120) == combinations(300, 120)


class TestStrategySelection:
    @pytest.mark.parametrize(
        "n, expected",
        [
            (0, CombinationStrategy.DIRECT),
            (29, CombinationStrategy.DIRECT),
            (30, CombinationStrategy.LOG),
            (10_000, CombinationStrategy.LOG),
        ],
    )
    def test_switch_point(self, n: int, expected: CombinationStrategy) -> None:
        assert select_combination_strategy(n) is expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (3, True),
        (3.0, True),
        (np.int32(4), True),
        (np.float64(4.0), True),
        (3.5, False),
        (math.inf, False),
        (math.nan, False),
    ],
)
def test_is_integral(value: float, expected: bool) -> None:
    assert is_integral(value) is expected

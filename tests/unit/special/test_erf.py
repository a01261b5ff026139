from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.special import erf as scipy_erf

from probcalc.special.erf import erf

# Maximal absolute error of Abramowitz and Stegun 7.1.26
APPROXIMATION_ERROR = 1.5e-7


class TestErf:
    def test_scalar_input_returns_float(self) -> None:
        assert isinstance(erf(0.5), float)

    def test_zero(self) -> None:
        assert abs(erf(0.0)) < APPROXIMATION_ERROR

    @pytest.mark.parametrize("x", [0.1, 0.5, 1.0, 1.5, 2.0, 3.0, 5.0])
    def test_odd_symmetry(self, x: float) -> None:
        assert erf(-x) == -erf(x)

    def test_matches_reference_on_grid(self) -> None:
        xs = np.linspace(-6.0, 6.0, 1201)
        np.testing.assert_allclose(erf(xs), scipy_erf(xs), rtol=0, atol=APPROXIMATION_ERROR)

    def test_array_input_keeps_shape(self) -> None:
        xs = np.array([[-1.0, 0.0], [1.0, 2.0]])
        result = erf(xs)
        assert isinstance(result, np.ndarray)
        assert result.shape == xs.shape

    @pytest.mark.parametrize("x, expected", [(math.inf, 1.0), (-math.inf, -1.0)])
    def test_limits(self, x: float, expected: float) -> None:
        assert erf(x) == expected

    def test_deterministic(self) -> None:
        assert erf(0.7312) == erf(0.7312)

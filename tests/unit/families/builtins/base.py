"""
Common fixtures and utilities for distribution family tests.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import math
from typing import Any

import numpy as np


class BaseDistributionTest:
    """Base class for all distribution families' tests"""

    # Precision for floating point comparisons
    CALCULATION_PRECISION = 1e-10

    @staticmethod
    def assert_arrays_almost_equal(
        actual: np.ndarray[Any, Any], expected: np.ndarray[Any, Any], precision: float | None = None
    ) -> None:
        """Helper method to assert arrays are almost equal."""
        if precision is None:
            precision = BaseDistributionTest.CALCULATION_PRECISION

        np.testing.assert_array_almost_equal(actual, expected, decimal=int(-math.log10(precision)))

    @staticmethod
    def assert_complementary(metrics: Any, tolerance: float = 1e-9) -> None:
        """Point and tail probabilities of a discrete result add up."""
        assert abs(metrics.p_lt + metrics.p_eq + metrics.p_gt - 1.0) < tolerance
        assert abs(metrics.p_eq + metrics.p_gt - metrics.p_gte) < tolerance
        assert abs(metrics.p_lt + metrics.p_eq - metrics.p_lte) < tolerance

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import FrozenInstanceError

import pytest

from probcalc.distributions.metrics import (
    ComputedMetrics,
    DiscreteMetrics,
    NormalMetrics,
    clamp_probability,
)


@pytest.mark.parametrize(
    "value, expected",
    [(-1e-17, 0.0), (0.0, 0.0), (0.25, 0.25), (1.0, 1.0), (1.0 + 1e-15, 1.0), (-3.0, 0.0)],
)
def test_clamp_probability(value: float, expected: float) -> None:
    assert clamp_probability(value) == expected


def test_clamp_probability_keeps_nan() -> None:
    assert math.isnan(clamp_probability(math.nan))


class TestMetricsRecords:
    def test_records_are_immutable(self) -> None:
        metrics = ComputedMetrics(mean=1.0, variance=2.0, std_dev=math.sqrt(2.0))
        with pytest.raises(FrozenInstanceError):
            metrics.mean = 3.0  # type: ignore[misc]

    def test_discrete_metrics_defaults(self) -> None:
        metrics = DiscreteMetrics(
            mean=1.0, variance=1.0, std_dev=1.0, k=1, p_eq=0.3, p_lt=0.3, p_lte=0.6, p_gt=0.4,
            p_gte=0.7,
        )
        assert metrics.precision_degraded is False
        assert isinstance(metrics, ComputedMetrics)

    def test_normal_metrics_optional_fields(self) -> None:
        metrics = NormalMetrics(mean=0.0, variance=1.0, std_dev=1.0)
        assert metrics.z_score is None
        assert metrics.p_between is None

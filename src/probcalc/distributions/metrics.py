"""
Computed Metrics
================

Immutable result records returned by the engines' aggregate functions:

- :class:`ComputedMetrics`: mean, variance and standard deviation.
- :class:`DiscreteMetrics`: adds point and cumulative probabilities at ``k``.
- :class:`NormalMetrics`: adds z-score, density and tail/range probabilities.
- :class:`ContinuousUniformMetrics`: adds density, CDF and range probability.

Notes
-----
Probabilities are clamped to ``[0, 1]`` with :func:`clamp_probability`
before being stored. Moments are stored as computed, ``NaN`` included.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass


def clamp_probability(value: float) -> float:
    """
    Clamp a probability into ``[0, 1]``.

    ``NaN`` is returned unchanged so that undefined quantities stay visible.
    """
    if math.isnan(value):
        return value
    return max(0.0, min(1.0, value))


@dataclass(frozen=True, slots=True)
class ComputedMetrics:
    """
    Summary statistics of a distribution.

    Parameters
    ----------
    mean : float
        Expected value.
    variance : float
        Variance.
    std_dev : float
        Standard deviation.
    """

    mean: float
    variance: float
    std_dev: float


@dataclass(frozen=True, slots=True)
class DiscreteMetrics(ComputedMetrics):
    """
    Summary statistics and probabilities at an integer point ``k``.

    Parameters
    ----------
    k : int
        Evaluation point.
    p_eq : float
        P(X = k).
    p_lt : float
        P(X < k).
    p_lte : float
        P(X <= k).
    p_gt : float
        P(X > k), derived as ``1 - P(X <= k)``.
    p_gte : float
        P(X >= k), derived as ``1 - P(X < k)``.
    precision_degraded : bool, default=False
        Intermediate values exceeded the float range; probabilities are
        best-effort.
    """

    k: int
    p_eq: float
    p_lt: float
    p_lte: float
    p_gt: float
    p_gte: float
    precision_degraded: bool = False


@dataclass(frozen=True, slots=True)
class NormalMetrics(ComputedMetrics):
    """
    Normal summary statistics with optional point and range results.

    Point results (``z_score``, ``pdf``, ``p_lt``, ``p_gt``) are filled when a
    single ``x`` is requested, ``p_between`` when a pair ``x1``, ``x2`` is.
    """

    z_score: float | None = None
    pdf: float | None = None
    p_lt: float | None = None
    p_gt: float | None = None
    p_between: float | None = None


@dataclass(frozen=True, slots=True)
class ContinuousUniformMetrics(ComputedMetrics):
    """
    Continuous uniform summary statistics with optional point and range results.

    ``x1`` and ``x2`` hold the range bounds after reordering, ``swapped`` tells
    whether the caller passed them in descending order.
    """

    pdf: float | None = None
    cdf: float | None = None
    p_between: float | None = None
    x1: float | None = None
    x2: float | None = None
    swapped: bool = False


__all__ = [
    "ComputedMetrics",
    "ContinuousUniformMetrics",
    "DiscreteMetrics",
    "NormalMetrics",
    "clamp_probability",
]

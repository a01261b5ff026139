"""
Poisson distribution family implementation.

The PMF switches to log-space evaluation for large rates or counts; the
switch point is :func:`select_pmf_strategy`. Cumulative probabilities are
sums of the PMF over a bounded window of the support.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from enum import StrEnum
from typing import TYPE_CHECKING, cast

from probcalc.distributions.metrics import DiscreteMetrics, clamp_probability
from probcalc.distributions.support import IntegerRangeSupport
from probcalc.families.parametric_family import ParametricFamily
from probcalc.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from probcalc.families.registry import ParametricFamilyRegister
from probcalc.special.combinatorics import factorial, is_integral, log_factorial
from probcalc.types import CharacteristicName, FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from typing import Any

    from probcalc.types import Number

LOG_SPACE_RATE_THRESHOLD = 700
"""Rates above this value make exp(-lambda) underflow in direct evaluation."""

LOG_SPACE_K_THRESHOLD = 170
"""Counts above this value make k! overflow in direct evaluation."""

TAIL_SPREAD = 10
TAIL_PADDING = 10
EARLY_STOP_SPREAD = 5
NEGLIGIBLE_PROBABILITY = 1e-15


class PmfStrategy(StrEnum):
    """
    Evaluation strategies for the Poisson PMF.

    Attributes
    ----------
    DIRECT : str
        ``exp(-lambda) * lambda**k / k!``.
    LOG : str
        ``exp(-lambda + k * ln(lambda) - ln(k!))``.
    """

    DIRECT = "direct"
    LOG = "log"


def select_pmf_strategy(lam: float, k: int) -> PmfStrategy:
    """Choose how to evaluate ``P(X = k)`` for rate ``lam``."""
    if lam > LOG_SPACE_RATE_THRESHOLD or k > LOG_SPACE_K_THRESHOLD:
        return PmfStrategy.LOG
    return PmfStrategy.DIRECT


def _log_pmf(lam: float, k: int) -> float:
    if lam == 0:
        return 1.0 if k == 0 else 0.0
    p = math.exp(-lam + k * math.log(lam) - log_factorial(k))
    return p if math.isfinite(p) else 0.0


def _direct_pmf(lam: float, k: int) -> float:
    fact_k = factorial(k)
    if math.isinf(fact_k):
        return 0.0
    try:
        p = math.exp(-lam) * math.pow(lam, k) / fact_k
    except OverflowError:
        # lambda**k left the float range although the probability itself may not
        return _log_pmf(lam, k)
    return p if math.isfinite(p) else 0.0


def poisson_pmf(lam: float, k: Number) -> float:
    """
    Probability mass function ``P(X = k)``.

    Parameters
    ----------
    lam : float
        Rate, ``lam >= 0``.
    k : Number
        Number of events.

    Returns
    -------
    float
        Probability of exactly ``k`` events; ``0.0`` for a negative rate and
        for negative or non-integer ``k``.
    """
    if lam < 0 or k < 0 or not is_integral(k):
        return 0.0
    k = int(k)

    if select_pmf_strategy(lam, k) is PmfStrategy.LOG:
        return _log_pmf(lam, k)
    return _direct_pmf(lam, k)


def poisson_support() -> IntegerRangeSupport:
    """Support of the Poisson distribution: all non-negative integers."""
    return IntegerRangeSupport(min_k=0)


def poisson_summation_limit(lam: float, k: Number) -> int:
    """
    Exclusive upper bound of the summation window for cumulative probabilities.

    ``max(k + 1, ceil(lam + 10 * sqrt(lam) + 10))``: covers the requested
    point and all of the distribution's mass within float precision.
    """
    return max(
        math.floor(k) + 1,
        math.ceil(lam + TAIL_SPREAD * math.sqrt(lam) + TAIL_PADDING),
    )


def poisson_mean(lam: float) -> float:
    return lam


def poisson_variance(lam: float) -> float:
    return lam


def poisson_std_dev(lam: float) -> float:
    """Standard deviation ``sqrt(lam)``; ``NaN`` for a negative rate."""
    if lam < 0:
        return math.nan
    return math.sqrt(lam)


def poisson_probabilities(lam: float, k: Number) -> DiscreteMetrics:
    """
    Moments and point/cumulative probabilities at ``k``.

    Parameters
    ----------
    lam : float
        Rate, ``lam >= 0``.
    k : Number
        Evaluation point.

    Returns
    -------
    DiscreteMetrics
        ``P(X > k)`` and ``P(X >= k)`` are the complements of ``P(X <= k)``
        and ``P(X < k)``, so each pair sums to one before clamping.

    Notes
    -----
    Summation stops early once terms are negligible beyond
    ``lam + 5 * sqrt(lam)``. A negative rate yields zero mass everywhere.
    """
    p_eq = 0.0
    p_lt = 0.0
    p_lte = 0.0

    if lam >= 0:
        spread = EARLY_STOP_SPREAD * math.sqrt(lam)
        window = poisson_support().truncated(poisson_summation_limit(lam, k) - 1)
        for i in window:
            prob = poisson_pmf(lam, i)
            if prob < NEGLIGIBLE_PROBABILITY and i > lam + spread:
                break
            if i == k:
                p_eq = prob
            if i < k:
                p_lt += prob
            if i <= k:
                p_lte += prob

    return DiscreteMetrics(
        mean=poisson_mean(lam),
        variance=poisson_variance(lam),
        std_dev=poisson_std_dev(lam),
        k=k,
        p_eq=clamp_probability(p_eq),
        p_lt=clamp_probability(p_lt),
        p_lte=clamp_probability(p_lte),
        p_gt=clamp_probability(1 - p_lte),
        p_gte=clamp_probability(1 - p_lt),
    )


def poisson_cdf(lam: float, k: Number) -> float:
    """Cumulative probability ``P(X <= k)``."""
    return poisson_probabilities(lam, k).p_lte


def configure_poisson_family() -> None:
    """
    Configure and register the Poisson distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.POISSON):
        return

    POISSON_DOC = """
    Poisson distribution.

    Number of events occurring in a fixed interval when events happen
    independently at a constant average rate λ.

    Probability mass function:
        P(X = k) = e^(-λ) * λ^k / k!,  k = 0, 1, 2, ...
    """

    def pmf(parameters: Parametrization, k: Number) -> float:
        parameters = cast(_Rate, parameters)
        return poisson_pmf(parameters.lam, k)

    def cdf(parameters: Parametrization, k: Number) -> float:
        parameters = cast(_Rate, parameters)
        return poisson_cdf(parameters.lam, k)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        return poisson_mean(cast(_Rate, parameters).lam)

    def var_func(parameters: Parametrization, _: Any) -> float:
        return poisson_variance(cast(_Rate, parameters).lam)

    def std_func(parameters: Parametrization, _: Any) -> float:
        return poisson_std_dev(cast(_Rate, parameters).lam)

    Poisson = ParametricFamily(
        name=FamilyName.POISSON,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["rate"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.STD: std_func,
        },
        support_by_parametrization=lambda _: poisson_support(),
    )
    Poisson.__doc__ = POISSON_DOC

    @parametrization(family=Poisson, name="rate")
    class _Rate(Parametrization):
        """
        Rate parametrization of the Poisson distribution.

        Parameters
        ----------
        lam : float
            Average number of events (λ)
        """

        lam: float

        @constraint(description="lam >= 0")
        def check_rate_non_negative(self) -> bool:
            return self.lam >= 0

    ParametricFamilyRegister.register(Poisson)

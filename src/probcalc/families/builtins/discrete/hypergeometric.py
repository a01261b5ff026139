"""
Hypergeometric distribution family implementation.

Outcomes outside the support have probability zero. When ``C(N, n)``
exceeds the float range the PMF is best-effort and a
:class:`~probcalc.errors.PrecisionWarning` is emitted.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import warnings
from typing import TYPE_CHECKING, cast

from probcalc.distributions.metrics import DiscreteMetrics, clamp_probability
from probcalc.distributions.support import IntegerRangeSupport
from probcalc.errors import PrecisionWarning
from probcalc.families.parametric_family import ParametricFamily
from probcalc.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from probcalc.families.registry import ParametricFamilyRegister
from probcalc.special.combinatorics import combinations, is_integral
from probcalc.types import CharacteristicName, FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from typing import Any

    from probcalc.types import Number

PRECISION_WARNING_MESSAGE = (
    "C({N}, {n}) exceeds the float range (> 1.79e308); "
    "hypergeometric probabilities may be inaccurate or zero."
)


def _valid_parameters(N: Number, K: Number, n: Number) -> bool:
    if not (is_integral(N) and is_integral(K) and is_integral(n)):
        return False
    return N >= 0 and K >= 0 and n >= 0 and K <= N and n <= N


def _is_possible(N: Number, K: Number, n: Number, k: Number) -> bool:
    if not _valid_parameters(N, K, n) or not is_integral(k):
        return False
    return 0 <= k <= n and k <= K and (n - k) <= (N - K)


def _ratio(N: int, K: int, n: int, k: int, denominator: float) -> float:
    if denominator == 0 or math.isinf(denominator):
        return 0.0

    successes = combinations(K, k)
    failures = combinations(N - K, n - k)
    if math.isinf(successes) or math.isinf(failures):
        return 0.0

    return clamp_probability(successes * failures / denominator)


def _warn_precision(N: Number, n: Number) -> None:
    warnings.warn(
        PRECISION_WARNING_MESSAGE.format(N=N, n=n),
        PrecisionWarning,
        stacklevel=3,
    )


def hypergeometric_pmf(N: Number, K: Number, n: Number, k: Number) -> float:
    """
    Probability mass function ``P(X = k)``.

    Parameters
    ----------
    N : Number
        Population size.
    K : Number
        Number of success states in the population.
    n : Number
        Sample size (number of draws).
    k : Number
        Number of observed successes in the sample.

    Returns
    -------
    float
        ``C(K, k) * C(N - K, n - k) / C(N, n)``; ``0.0`` for impossible
        outcomes and for configurations whose combinatorics leave the float
        range.

    Warns
    -----
    PrecisionWarning
        If ``C(N, n)`` is infinite.
    """
    if not _is_possible(N, K, n, k):
        return 0.0

    denominator = combinations(N, n)
    if math.isinf(denominator):
        _warn_precision(N, n)
    return _ratio(int(N), int(K), int(n), int(k), denominator)


def hypergeometric_support(N: Number, K: Number, n: Number) -> IntegerRangeSupport:
    """Values with non-zero mass: ``[max(0, n - (N - K)), min(n, K)]``."""
    return IntegerRangeSupport(
        min_k=int(max(0, n - (N - K))),
        max_k=int(min(n, K)),
    )


def hypergeometric_mean(N: Number, K: Number, n: Number) -> float:
    """Mean ``n * K / N``; ``NaN`` for ``N <= 0``."""
    if N <= 0:
        return math.nan
    return n * (K / N)


def hypergeometric_variance(N: Number, K: Number, n: Number) -> float:
    """
    Variance ``n * p * (1 - p) * (N - n) / (N - 1)`` with ``p = K / N``.

    ``NaN`` for ``N <= 1`` where the finite population correction is
    undefined. Negative rounding residue is floored at zero.
    """
    if N <= 1:
        return math.nan
    p = K / N
    variance = n * p * (1 - p) * ((N - n) / (N - 1))
    return variance if variance >= 0 else 0.0


def hypergeometric_std_dev(N: Number, K: Number, n: Number) -> float:
    variance = hypergeometric_variance(N, K, n)
    return math.nan if math.isnan(variance) else math.sqrt(variance)


def hypergeometric_probabilities(N: Number, K: Number, n: Number, k: Number) -> DiscreteMetrics:
    """
    Moments and point/cumulative probabilities at ``k``.

    The support is traversed once; ``P(X = k)`` is captured during the pass
    and the upper tails are derived from the lower ones.

    Parameters
    ----------
    N : Number
        Population size.
    K : Number
        Number of success states in the population.
    n : Number
        Sample size.
    k : Number
        Evaluation point.

    Returns
    -------
    DiscreteMetrics
        ``precision_degraded`` is set when ``C(N, n)`` is infinite.

    Warns
    -----
    PrecisionWarning
        Once per call if ``C(N, n)`` is infinite and ``n > 0``.
    """
    p_eq = 0.0
    p_lt = 0.0
    p_lte = 0.0
    precision_degraded = False

    if _valid_parameters(N, K, n):
        denominator = combinations(N, n)
        if math.isinf(denominator) and n > 0:
            precision_degraded = True
            _warn_precision(N, n)

        for i in hypergeometric_support(N, K, n):
            prob = _ratio(int(N), int(K), int(n), i, denominator)
            if i == k:
                p_eq = prob
            if i < k:
                p_lt += prob
            if i <= k:
                p_lte += prob

    return DiscreteMetrics(
        mean=hypergeometric_mean(N, K, n),
        variance=hypergeometric_variance(N, K, n),
        std_dev=hypergeometric_std_dev(N, K, n),
        k=k,
        p_eq=clamp_probability(p_eq),
        p_lt=clamp_probability(p_lt),
        p_lte=clamp_probability(p_lte),
        p_gt=clamp_probability(1 - p_lte),
        p_gte=clamp_probability(1 - p_lt),
        precision_degraded=precision_degraded,
    )


def hypergeometric_cdf(N: Number, K: Number, n: Number, k: Number) -> float:
    """Cumulative probability ``P(X <= k)``."""
    return hypergeometric_probabilities(N, K, n, k).p_lte


def configure_hypergeometric_family() -> None:
    """
    Configure and register the Hypergeometric distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.HYPERGEOMETRIC):
        return

    HYPERGEOMETRIC_DOC = """
    Hypergeometric distribution.

    Number of successes in n draws without replacement from a population of
    N items of which K are successes.

    Probability mass function:
        P(X = k) = C(K, k) * C(N - K, n - k) / C(N, n),
        max(0, n - (N - K)) <= k <= min(n, K)
    """

    def _args(parameters: Parametrization) -> tuple[int, int, int]:
        parameters = cast(_Standard, parameters)
        return parameters.population_size, parameters.success_states, parameters.sample_size

    def pmf(parameters: Parametrization, k: Number) -> float:
        return hypergeometric_pmf(*_args(parameters), k)

    def cdf(parameters: Parametrization, k: Number) -> float:
        return hypergeometric_cdf(*_args(parameters), k)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        return hypergeometric_mean(*_args(parameters))

    def var_func(parameters: Parametrization, _: Any) -> float:
        return hypergeometric_variance(*_args(parameters))

    def std_func(parameters: Parametrization, _: Any) -> float:
        return hypergeometric_std_dev(*_args(parameters))

    Hypergeometric = ParametricFamily(
        name=FamilyName.HYPERGEOMETRIC,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.STD: std_func,
        },
        support_by_parametrization=lambda p: hypergeometric_support(*_args(p)),
    )
    Hypergeometric.__doc__ = HYPERGEOMETRIC_DOC

    @parametrization(family=Hypergeometric, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of the hypergeometric distribution.

        Parameters
        ----------
        population_size : int
            Population size (N)
        success_states : int
            Number of success states in the population (K)
        sample_size : int
            Number of draws (n)
        """

        population_size: int
        success_states: int
        sample_size: int

        @constraint(description="N, K, n are integers")
        def check_integers(self) -> bool:
            return all(
                is_integral(v)
                for v in (self.population_size, self.success_states, self.sample_size)
            )

        @constraint(description="N, K, n >= 0")
        def check_non_negative(self) -> bool:
            return min(self.population_size, self.success_states, self.sample_size) >= 0

        @constraint(description="K <= N")
        def check_successes_within_population(self) -> bool:
            return self.success_states <= self.population_size

        @constraint(description="n <= N")
        def check_sample_within_population(self) -> bool:
            return self.sample_size <= self.population_size

    ParametricFamilyRegister.register(Hypergeometric)

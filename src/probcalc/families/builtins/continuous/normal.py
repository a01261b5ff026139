"""
Normal distribution: density, CDF, z-scores, range probabilities, the
density curve for plotting, and the Normal family.

The CDF is built on the closed-form approximation in
:mod:`probcalc.special.erf`, so it is accurate to about 1e-7.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np

from probcalc.distributions.metrics import NormalMetrics, clamp_probability
from probcalc.distributions.support import ContinuousSupport
from probcalc.families.parametric_family import ParametricFamily
from probcalc.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from probcalc.families.registry import ParametricFamilyRegister
from probcalc.special.erf import erf
from probcalc.types import (
    CharacteristicName,
    FamilyName,
    UnivariateContinuous,
    unwrap_scalar,
)

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from probcalc.types import Number, NumericArray

SQRT_2 = math.sqrt(2)


def normal_pdf(x: Number | NumericArray, mean: float, std_dev: float) -> float | NumericArray:
    """
    Probability density function.

    f(x) = 1/(σ√(2π)) * exp(-(x-μ)²/(2σ²))

    Parameters
    ----------
    x : Number or NumericArray
        Points at which to evaluate the density
    mean : float
        Mean (μ)
    std_dev : float
        Standard deviation (σ)

    Returns
    -------
    float or NumericArray
        Density values at points x; ``NaN`` when ``std_dev <= 0``
    """
    arr = np.asarray(x, dtype=np.float64)
    if std_dev <= 0:
        return unwrap_scalar(np.full_like(arr, np.nan))

    coefficient = 1.0 / (std_dev * np.sqrt(2 * np.pi))
    exponent = -0.5 * ((arr - mean) / std_dev) ** 2
    return unwrap_scalar(coefficient * np.exp(exponent))


def normal_cdf(x: Number | NumericArray, mean: float, std_dev: float) -> float | NumericArray:
    """
    Cumulative distribution function Φ(x) = 0.5 * (1 + erf((x-μ)/(σ√2))).

    Returns ``NaN`` when ``std_dev <= 0``.
    """
    arr = np.asarray(x, dtype=np.float64)
    if std_dev <= 0:
        return unwrap_scalar(np.full_like(arr, np.nan))

    z = (arr - mean) / (std_dev * SQRT_2)
    return unwrap_scalar(0.5 * (1 + np.asarray(erf(z))))


def z_score(x: Number | NumericArray, mean: float, std_dev: float) -> float | NumericArray:
    """Standard score (x - μ) / σ; ``NaN`` when ``std_dev <= 0``."""
    arr = np.asarray(x, dtype=np.float64)
    if std_dev <= 0:
        return unwrap_scalar(np.full_like(arr, np.nan))
    return unwrap_scalar((arr - mean) / std_dev)


def normal_probability_between(x1: float, x2: float, mean: float, std_dev: float) -> float:
    """
    Probability ``P(x1 < X < x2)`` as ``Φ(x2) - Φ(x1)``.

    Bounds given in descending order are swapped. ``NaN`` when
    ``std_dev <= 0``.
    """
    if x1 > x2:
        x1, x2 = x2, x1
    lower = cast(float, normal_cdf(x1, mean, std_dev))
    upper = cast(float, normal_cdf(x2, mean, std_dev))
    return clamp_probability(upper - lower)


def normal_metrics(
    mean: float,
    std_dev: float,
    x: float | None = None,
    x1: float | None = None,
    x2: float | None = None,
) -> NormalMetrics:
    """
    Moments with optional point and range results.

    Parameters
    ----------
    mean : float
        Mean (μ).
    std_dev : float
        Standard deviation (σ).
    x : float, optional
        Point for the z-score, density and tail probabilities
        ``P(X < x)`` and ``P(X > x) = 1 - P(X < x)``.
    x1, x2 : float, optional
        Range bounds for ``P(x1 < X < x2)``; evaluated only when both are given.
    """
    z = pdf = p_lt = p_gt = p_between = None

    if x is not None:
        z = cast(float, z_score(x, mean, std_dev))
        pdf = cast(float, normal_pdf(x, mean, std_dev))
        cdf = cast(float, normal_cdf(x, mean, std_dev))
        p_lt = clamp_probability(cdf)
        p_gt = clamp_probability(1 - cdf)

    if x1 is not None and x2 is not None:
        p_between = normal_probability_between(x1, x2, mean, std_dev)

    return NormalMetrics(
        mean=mean,
        variance=std_dev**2,
        std_dev=std_dev,
        z_score=z,
        pdf=pdf,
        p_lt=p_lt,
        p_gt=p_gt,
        p_between=p_between,
    )


def normal_pdf_curve(
    mean: float,
    std_dev: float,
    num_points: int = 100,
    width: float = 4.0,
) -> tuple[NumericArray, NumericArray]:
    """
    Density sampled over ``mean ± width * std_dev``.

    Parameters
    ----------
    mean : float
        Mean (μ)
    std_dev : float
        Standard deviation (σ)
    num_points : int, default=100
        Number of intervals; ``num_points + 1`` points are returned
    width : float, default=4.0
        Half-width of the range in standard deviations

    Returns
    -------
    tuple[NumericArray, NumericArray]
        Abscissae and density values

    Raises
    ------
    ValueError
        If ``num_points`` is not positive
    """
    if num_points <= 0:
        raise ValueError("num_points must be a positive integer.")

    xs = np.linspace(mean - width * std_dev, mean + width * std_dev, num_points + 1)
    return xs, cast("NumericArray", np.asarray(normal_pdf(xs, mean, std_dev)))


def configure_normal_family() -> None:
    """
    Create the Normal family and put it into the register.

    ``meanStd`` with ``mu`` and ``sigma`` is the base parametrization;
    ``meanVar`` takes the variance instead of the standard deviation.
    """
    if ParametricFamilyRegister.contains(FamilyName.NORMAL):
        return

    def location_scale(parameters: Parametrization) -> tuple[float, float]:
        base = cast(_MuSigma, parameters)
        return base.mu, base.sigma

    def density(parameters: Parametrization, x: NumericArray) -> float | NumericArray:
        return normal_pdf(x, *location_scale(parameters))

    def distribution_function(parameters: Parametrization, x: NumericArray) -> float | NumericArray:
        return normal_cdf(x, *location_scale(parameters))

    def moment(index: int) -> Callable[[Parametrization, Any], float]:
        def evaluate(parameters: Parametrization, _: Any) -> float:
            mu, sigma = location_scale(parameters)
            return (mu, sigma**2, sigma)[index]

        return evaluate

    family = ParametricFamily(
        name=FamilyName.NORMAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["meanStd", "meanVar"],
        distr_characteristics={
            CharacteristicName.PDF: density,
            CharacteristicName.CDF: distribution_function,
            CharacteristicName.MEAN: moment(0),
            CharacteristicName.VAR: moment(1),
            CharacteristicName.STD: moment(2),
        },
        support_by_parametrization=lambda _: ContinuousSupport(),
    )
    family.__doc__ = """
    Normal distribution with mean ``mu`` and standard deviation ``sigma``.

    f(x) = exp(-(x - mu)^2 / (2 sigma^2)) / (sigma sqrt(2 pi)), supported on
    the whole real line.
    """

    @parametrization(family=family, name="meanStd")
    class _MuSigma(Parametrization):
        mu: float
        sigma: float

        @constraint(description="sigma > 0")
        def check_sigma(self) -> bool:
            return self.sigma > 0

    @parametrization(family=family, name="meanVar")
    class _MuVariance(Parametrization):
        mu: float
        var: float

        @constraint(description="var > 0")
        def check_var(self) -> bool:
            return self.var > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _MuSigma(mu=self.mu, sigma=math.sqrt(self.var))

    ParametricFamilyRegister.register(family)

"""
Continuous uniform distribution on ``[a, b]``: density, CDF, range
probability, moments and the ContinuousUniform family.

An empty interval (``a >= b``) has zero density and an undefined CDF.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np

from probcalc.distributions.metrics import ContinuousUniformMetrics, clamp_probability
from probcalc.distributions.support import ContinuousSupport
from probcalc.families.parametric_family import ParametricFamily
from probcalc.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from probcalc.families.registry import ParametricFamilyRegister
from probcalc.types import (
    CharacteristicName,
    FamilyName,
    UnivariateContinuous,
    unwrap_scalar,
)

if TYPE_CHECKING:
    from typing import Any

    from probcalc.types import Number, NumericArray


def continuous_uniform_pdf(a: float, b: float, x: Number | NumericArray) -> float | NumericArray:
    """
    Probability density function.
        - For x in [a, b]: returns 1 / (b - a)
        - Otherwise: returns 0
        - For a >= b: returns 0 everywhere

    Parameters
    ----------
    a : float
        Lower bound.
    b : float
        Upper bound.
    x : Number or NumericArray
        Points at which to evaluate the density.

    Returns
    -------
    float or NumericArray
        Density values at points x
    """
    arr = np.asarray(x, dtype=np.float64)
    if a >= b:
        return unwrap_scalar(np.zeros_like(arr))
    return unwrap_scalar(np.where((arr >= a) & (arr <= b), 1.0 / (b - a), 0.0))


def continuous_uniform_cdf(a: float, b: float, x: Number | NumericArray) -> float | NumericArray:
    """
    Cumulative distribution function.
        - For x < a: returns 0
        - For x > b: returns 1
        - Otherwise: returns (x - a) / (b - a)

    Returns ``NaN`` when ``a >= b``: unlike the density, the CDF of an
    empty interval is undefined rather than zero.
    """
    arr = np.asarray(x, dtype=np.float64)
    if a >= b:
        return unwrap_scalar(np.full_like(arr, np.nan))
    return unwrap_scalar(np.clip((arr - a) / (b - a), 0.0, 1.0))


def continuous_uniform_probability_in_range(a: float, b: float, x1: float, x2: float) -> float:
    """
    Probability ``P(x1 <= X <= x2)``.

    The bounds are reordered if ``x1 > x2`` and each is clamped into
    ``[a, b]``. A degenerate clamped interval, or ``a >= b``, gives ``0``.
    """
    if a >= b:
        return 0.0

    if x1 > x2:
        x1, x2 = x2, x1

    x1_clamped = max(a, min(b, x1))
    x2_clamped = max(a, min(b, x2))
    if x2_clamped <= x1_clamped:
        return 0.0

    return (x2_clamped - x1_clamped) / (b - a)


def continuous_uniform_mean(a: float, b: float) -> float:
    if a > b:
        return math.nan
    return (a + b) / 2


def continuous_uniform_variance(a: float, b: float) -> float:
    if a > b:
        return math.nan
    return (b - a) ** 2 / 12


def continuous_uniform_std_dev(a: float, b: float) -> float:
    if a > b:
        return math.nan
    return math.sqrt(continuous_uniform_variance(a, b))


def continuous_uniform_metrics(
    a: float,
    b: float,
    x: float | None = None,
    x1: float | None = None,
    x2: float | None = None,
) -> ContinuousUniformMetrics:
    """
    Moments with optional point and range results.

    Parameters
    ----------
    a, b : float
        Interval bounds.
    x : float, optional
        Point for the density and the CDF.
    x1, x2 : float, optional
        Range bounds; evaluated only when both are given and ``a < b``.

    Returns
    -------
    ContinuousUniformMetrics
        Range bounds are reported in ascending order with ``swapped`` set
        when the caller passed them descending.
    """
    pdf = cdf = p_between = None
    swapped = False

    if x is not None:
        pdf = cast(float, continuous_uniform_pdf(a, b, x))
        cdf = clamp_probability(cast(float, continuous_uniform_cdf(a, b, x)))

    if x1 is not None and x2 is not None and a < b:
        if x1 > x2:
            x1, x2 = x2, x1
            swapped = True
        p_between = clamp_probability(continuous_uniform_probability_in_range(a, b, x1, x2))

    return ContinuousUniformMetrics(
        mean=continuous_uniform_mean(a, b),
        variance=continuous_uniform_variance(a, b),
        std_dev=continuous_uniform_std_dev(a, b),
        pdf=pdf,
        cdf=cdf,
        p_between=p_between,
        x1=x1,
        x2=x2,
        swapped=swapped,
    )


def continuous_uniform_pdf_outline(a: float, b: float) -> tuple[NumericArray, NumericArray]:
    """
    Vertices of the density plot of ``U(a, b)``.

    For ``a < b`` the six points trace the x-axis from ``a - pad`` to ``a``,
    the rectangle of height ``1 / (b - a)`` over ``[a, b]`` and the x-axis
    again up to ``b + pad``, with ``pad = (b - a) / 4``. An empty interval
    gives a flat zero line of three points centred between ``a`` and ``b``
    with half-width ``|b - a| / 2``, or ``1`` when ``a == b``.

    Returns
    -------
    tuple[NumericArray, NumericArray]
        Abscissae and density values.
    """
    if a < b:
        pad = (b - a) / 4
        height = 1.0 / (b - a)
        xs = np.array([a - pad, a, a, b, b, b + pad], dtype=np.float64)
        ys = np.array([0.0, 0.0, height, height, 0.0, 0.0])
        return xs, ys

    middle = (a + b) / 2
    pad = abs(b - a) / 2 or 1.0
    return np.array([middle - pad, middle, middle + pad], dtype=np.float64), np.zeros(3)


def configure_uniform_family() -> None:
    """Create the ContinuousUniform family and put it into the register."""
    if ParametricFamilyRegister.contains(FamilyName.CONTINUOUS_UNIFORM):
        return

    def _uniform_bounds(parameters: Parametrization) -> tuple[float, float]:
        base = cast(_UniformParameters, parameters)
        return base.a, base.b

    family = ParametricFamily(
        name=FamilyName.CONTINUOUS_UNIFORM,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard", "meanWidth"],
        distr_characteristics={
            CharacteristicName.PDF: lambda p, x: continuous_uniform_pdf(*_uniform_bounds(p), x),
            CharacteristicName.CDF: lambda p, x: continuous_uniform_cdf(*_uniform_bounds(p), x),
            CharacteristicName.MEAN: lambda p, _: continuous_uniform_mean(*_uniform_bounds(p)),
            CharacteristicName.VAR: lambda p, _: continuous_uniform_variance(*_uniform_bounds(p)),
            CharacteristicName.STD: lambda p, _: continuous_uniform_std_dev(*_uniform_bounds(p)),
        },
        support_by_parametrization=lambda p: ContinuousSupport(*_uniform_bounds(p)),
    )
    family.__doc__ = """
    Continuous uniform distribution on ``[a, b]``.

    The density is ``1 / (b - a)`` inside the interval and zero outside.
    """

    @parametrization(family=family, name="standard")
    class _UniformParameters(Parametrization):
        """Interval bounds ``a`` and ``b``."""

        a: float
        b: float

        @constraint(description="a < b")
        def check_ordered(self) -> bool:
            return self.a < self.b

    @parametrization(family=family, name="meanWidth")
    class _CenterWidth(Parametrization):
        """Interval centre ``mean`` and length ``width``."""

        mean: float
        width: float

        @constraint(description="width > 0")
        def check_width(self) -> bool:
            return self.width > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _UniformParameters(a=self.mean - self.width / 2, b=self.mean + self.width / 2)

    ParametricFamilyRegister.register(family)

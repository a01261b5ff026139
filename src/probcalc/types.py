"""
Shared types
============

Distribution kinds, numeric aliases, the real interval used as a continuous
support, and the names under which families and their characteristics are
registered.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import StrEnum
from math import inf
from typing import Any, TypeAlias, cast, overload

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """Whether a distribution has a mass function or a density."""

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType:
    """
    Kind and dimension shared by every member of a family.

    Parameters
    ----------
    kind : Kind
        Discrete or continuous.
    dimension : int
        Dimension of the sample space.
    """

    kind: Kind
    dimension: int


UnivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=1)
UnivariateDiscrete = EuclideanDistributionType(kind=Kind.DISCRETE, dimension=1)

Number = np.floating[Any] | np.integer[Any] | int | float
"""Python or NumPy scalar."""

NumericArray = NDArray[np.floating[Any] | np.integer[Any]]
BoolArray = NDArray[np.bool_]


def unwrap_scalar(values: NumericArray) -> float | NumericArray:
    """Return a 0-d result as a Python float and anything else unchanged."""
    if np.ndim(values) == 0:
        return float(values)
    return values


@dataclass(frozen=True, slots=True)
class Interval1D:
    """
    Interval of the real line.

    Parameters
    ----------
    left, right : float
        Endpoints, infinite by default.
    left_closed, right_closed : bool
        Whether each endpoint belongs to the interval. An infinite endpoint
        is always open.
    """

    left: float = -inf
    right: float = inf
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "left_closed", self.left_closed and self.left != -inf)
        object.__setattr__(self, "right_closed", self.right_closed and self.right != inf)

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """Membership test, element-wise for arrays."""
        arr = np.asarray(x)
        above = arr >= self.left if self.left_closed else arr > self.left
        below = arr <= self.right if self.right_closed else arr < self.right
        inside = above & below

        if np.ndim(arr) == 0:
            return bool(inside)
        return cast(BoolArray, inside)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    @property
    def is_empty(self) -> bool:
        if self.left == self.right:
            return not (self.left_closed and self.right_closed)
        return self.left > self.right


ParametrizationName: TypeAlias = str
GenericCharacteristicName: TypeAlias = str


class CharacteristicName(StrEnum):
    """
    Characteristics a family can be queried for.

    Discrete families provide ``PMF``, continuous families ``PDF``. Moments
    ignore the evaluation point.
    """

    PDF = "pdf"
    CDF = "cdf"
    PMF = "pmf"
    MEAN = "mean"
    VAR = "var"
    STD = "std"


class FamilyName(StrEnum):
    POISSON = "Poisson"
    HYPERGEOMETRIC = "Hypergeometric"
    NORMAL = "Normal"
    CONTINUOUS_UNIFORM = "ContinuousUniform"


__all__ = [
    "Kind",
    "EuclideanDistributionType",
    "UnivariateContinuous",
    "UnivariateDiscrete",
    "Number",
    "NumericArray",
    "BoolArray",
    "unwrap_scalar",
    "Interval1D",
    "ParametrizationName",
    "GenericCharacteristicName",
    "CharacteristicName",
    "FamilyName",
]

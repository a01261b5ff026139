"""
Supports of distributions.

A continuous distribution is supported on a real interval
(:class:`ContinuousSupport`). A discrete one is supported on a run of
consecutive integers (:class:`IntegerRangeSupport`), which is also the
window discrete engines sum over for cumulative probabilities.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from itertools import count
from typing import TYPE_CHECKING, Protocol, cast, overload, runtime_checkable

import numpy as np

from probcalc.types import BoolArray, Interval1D, Number, NumericArray

if TYPE_CHECKING:
    from collections.abc import Iterator


@runtime_checkable
class Support(Protocol):
    """Anything answering membership for scalars and, element-wise, arrays."""

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


class ContinuousSupport(Interval1D, Support):
    """Real interval used as the support of a continuous distribution."""


@dataclass(frozen=True, slots=True)
class IntegerRangeSupport(Support):
    """
    Integers ``min_k, min_k + 1, ..., max_k``.

    Parameters
    ----------
    min_k : int
        First point.
    max_k : int or None, default=None
        Last point. ``None`` leaves the range open to the right, as for
        the Poisson distribution; iteration then never stops by itself.
    """

    min_k: int
    max_k: int | None = None

    @property
    def is_bounded(self) -> bool:
        return self.max_k is not None

    @property
    def is_empty(self) -> bool:
        return self.is_bounded and cast(int, self.max_k) < self.min_k

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """Integral points inside the range; element-wise for arrays."""
        values = np.asarray(x, dtype=float)
        upper = np.inf if self.max_k is None else self.max_k
        mask = (values == np.floor(values)) & (values >= self.min_k) & (values <= upper)
        return bool(mask) if mask.ndim == 0 else cast(BoolArray, mask)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    def __iter__(self) -> Iterator[int]:
        if self.max_k is None:
            return count(self.min_k)
        return iter(range(self.min_k, self.max_k + 1))

    def __len__(self) -> int:
        if self.max_k is None:
            raise TypeError("Right-unbounded support has no length")
        return max(0, self.max_k - self.min_k + 1)

    def truncated(self, max_k: int) -> IntegerRangeSupport:
        """Bounded range with the same start, ending at ``max_k`` or earlier."""
        if self.max_k is not None and self.max_k < max_k:
            max_k = self.max_k
        return IntegerRangeSupport(self.min_k, max_k)


__all__ = [
    "Support",
    "ContinuousSupport",
    "IntegerRangeSupport",
]

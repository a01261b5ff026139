"""
Combinatorial primitives evaluated in double precision.

Values that exceed the float range are reported as ``math.inf`` instead of
wrapping around. :func:`combinations` picks one of two evaluation strategies
by the magnitude of ``n``; the switch point is :func:`select_combination_strategy`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from enum import StrEnum
from functools import lru_cache
from threading import Lock
from typing import TYPE_CHECKING

import numpy as np

from probcalc.errors import DomainError

if TYPE_CHECKING:
    from probcalc.types import Number

MAX_FACTORIAL_ARGUMENT = 170
"""Largest n for which n! is finite in double precision."""

DIRECT_COMBINATION_LIMIT = 30
"""Combinations with ``n`` below this value are computed from factorials."""

ROUNDING_TOLERANCE = 1e-9
"""Added before rounding log-space results to absorb exp/log round-trip error."""

LOG_FACTORIAL_TABLE_SIZE = 1_000_000
"""Largest n whose ln(n!) is memoized; larger values are summed on demand."""


class CombinationStrategy(StrEnum):
    """
    Evaluation strategies for binomial coefficients.

    Attributes
    ----------
    DIRECT : str
        Ratio of factorials, exact for small ``n``.
    LOG : str
        Running sum of logarithms, exponentiated once.
    """

    DIRECT = "direct"
    LOG = "log"


def is_integral(value: Number) -> bool:
    """Check that ``value`` is a finite number without a fractional part."""
    if isinstance(value, int | np.integer):
        return True
    try:
        return math.isfinite(value) and float(value).is_integer()
    except (TypeError, ValueError):
        return False


@lru_cache(maxsize=MAX_FACTORIAL_ARGUMENT + 1)
def _factorial(n: int) -> float:
    if n > MAX_FACTORIAL_ARGUMENT:
        return math.inf
    result = 1.0
    for i in range(2, n + 1):
        result *= i
    return result


# Prefix sums ln(0!), ln(1!), ... in summation order.
_log_factorial_table: list[float] = [0.0, 0.0]
_log_factorial_lock = Lock()


def _log_factorial(n: int) -> float:
    table = _log_factorial_table
    with _log_factorial_lock:
        start = len(table)
        if n < start:
            return table[n]
        total = table[start - 1]

    extension: list[float] = []
    for i in range(start, n + 1):
        total += math.log(i)
        if i <= LOG_FACTORIAL_TABLE_SIZE:
            extension.append(total)

    with _log_factorial_lock:
        if len(table) == start:
            table.extend(extension)
    return total


def factorial(n: Number) -> float:
    """
    Factorial of a non-negative integer.

    Parameters
    ----------
    n : Number
        Non-negative integer (integral floats are accepted).

    Returns
    -------
    float
        ``n!``, or ``math.inf`` when it exceeds the float range.

    Raises
    ------
    DomainError
        If ``n`` is negative or not an integer.
    """
    if n < 0:
        raise DomainError("Factorial is not defined for negative numbers.")
    if not is_integral(n):
        raise DomainError(f"Factorial requires an integer argument, got {n!r}.")
    return _factorial(int(n))


def log_factorial(n: Number) -> float:
    """
    Natural logarithm of ``n!`` as a sum of logarithms.

    Parameters
    ----------
    n : Number
        Non-negative integer.

    Returns
    -------
    float
        ``ln(n!)``; ``0.0`` for ``n`` in ``{0, 1}``.

    Raises
    ------
    DomainError
        If ``n`` is negative or not an integer.
    """
    if not is_integral(n) or n < 0:
        raise DomainError("LogFactorial requires a non-negative integer.")
    return _log_factorial(int(n))


def select_combination_strategy(n: Number) -> CombinationStrategy:
    """Choose how to evaluate ``C(n, k)`` for the given ``n``."""
    if n < DIRECT_COMBINATION_LIMIT:
        return CombinationStrategy.DIRECT
    return CombinationStrategy.LOG


def _direct_combinations(n: int, k: int) -> float | None:
    fact_n = _factorial(n)
    fact_k = _factorial(k)
    fact_nk = _factorial(n - k)
    if math.isinf(fact_n) or math.isinf(fact_k) or math.isinf(fact_nk):
        return None

    result = fact_n / (fact_k * fact_nk)
    return float(round(result)) if math.isfinite(result) else math.inf


def _log_combinations(n: int, k: int) -> float:
    log_result = 0.0
    for i in range(k):
        log_result += math.log(n - i) - math.log(i + 1)

    try:
        result = math.exp(log_result)
    except OverflowError:
        return math.inf
    return float(round(result + ROUNDING_TOLERANCE)) if math.isfinite(result) else math.inf


def combinations(n: Number, k: Number) -> float:
    """
    Binomial coefficient ``C(n, k)``.

    Parameters
    ----------
    n : Number
        Total number of items.
    k : Number
        Number of items to choose.

    Returns
    -------
    float
        Number of combinations rounded to an integer value, ``0.0`` when
        ``k < 0`` or ``k > n`` and ``math.inf`` when the value exceeds the
        float range.

    Raises
    ------
    DomainError
        If ``n`` or ``k`` is not an integer.

    Notes
    -----
    ``C(n, k) == C(n, n - k)`` is used to keep ``k <= n / 2``.
    """
    if k < 0 or k > n:
        return 0.0
    if not (is_integral(n) and is_integral(k)):
        raise DomainError(f"Combinations require integer arguments, got n={n!r}, k={k!r}.")
    n, k = int(n), int(k)
    if k == 0 or k == n:
        return 1.0
    if k > n / 2:
        k = n - k

    if select_combination_strategy(n) is CombinationStrategy.DIRECT:
        result = _direct_combinations(n, k)
        if result is not None:
            return result
    return _log_combinations(n, k)


__all__ = [
    "CombinationStrategy",
    "DIRECT_COMBINATION_LIMIT",
    "MAX_FACTORIAL_ARGUMENT",
    "combinations",
    "factorial",
    "is_integral",
    "log_factorial",
    "select_combination_strategy",
]

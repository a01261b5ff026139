"""
Special functions
=================

Scalar combinatorics and the error function used by the distribution
engines.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .combinatorics import (
    CombinationStrategy,
    combinations,
    factorial,
    is_integral,
    log_factorial,
    select_combination_strategy,
)
from .erf import erf

__all__ = [
    "CombinationStrategy",
    "combinations",
    "erf",
    "factorial",
    "is_integral",
    "log_factorial",
    "select_combination_strategy",
]

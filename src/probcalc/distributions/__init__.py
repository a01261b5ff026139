"""
Distributions subpackage

Shared building blocks of the distribution engines:

- support objects (:mod:`.support`);
- immutable result records (:mod:`.metrics`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .metrics import (
    ComputedMetrics,
    ContinuousUniformMetrics,
    DiscreteMetrics,
    NormalMetrics,
    clamp_probability,
)
from .support import ContinuousSupport, IntegerRangeSupport, Support

__all__ = [
    # metrics
    "ComputedMetrics",
    "ContinuousUniformMetrics",
    "DiscreteMetrics",
    "NormalMetrics",
    "clamp_probability",
    # support
    "Support",
    "ContinuousSupport",
    "IntegerRangeSupport",
]

"""
Error and warning types raised by probcalc.

Only genuinely invalid calls raise. Data conditions (impossible outcomes,
undefined statistics) are reported with ``0`` or ``NaN`` by the engines,
and degraded precision is reported with :class:`PrecisionWarning`.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class DomainError(ValueError):
    """Argument lies outside the mathematical domain of the function."""


class PrecisionWarning(UserWarning):
    """
    Intermediate values exceeded the float range.

    The accompanying result is a best-effort value and may be inaccurate
    or zero.
    """


__all__ = [
    "DomainError",
    "PrecisionWarning",
]

"""
Closed-form approximation of the error function.

Abramowitz and Stegun, formula 7.1.26. The maximal absolute error is
about 1.5e-7, which is enough for CDF evaluation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast, overload

import numpy as np

if TYPE_CHECKING:
    from probcalc.types import Number, NumericArray

A1 = 0.254829592
A2 = -0.284496736
A3 = 1.421413741
A4 = -1.453152027
A5 = 1.061405429
P = 0.3275911


@overload
def erf(x: Number) -> float: ...
@overload
def erf(x: NumericArray) -> NumericArray: ...


def erf(x: Number | NumericArray) -> float | NumericArray:
    """
    Error function.

    Parameters
    ----------
    x : Number or NumericArray
        Point(s) at which to evaluate erf.

    Returns
    -------
    float or NumericArray
        Approximation of erf(x); a float for scalar input.

    Notes
    -----
    The polynomial is evaluated on ``|x|`` and the sign is restored
    afterwards, with ``x = 0`` treated as positive.
    """
    arr = np.asarray(x, dtype=np.float64)
    sign = np.where(arr >= 0, 1.0, -1.0)
    z = np.abs(arr)

    t = 1.0 / (1.0 + P * z)
    y = 1.0 - (((((A5 * t + A4) * t) + A3) * t + A2) * t + A1) * t * np.exp(-z * z)
    result = sign * y

    if np.ndim(arr) == 0:
        return float(result)
    return cast("NumericArray", result)


__all__ = ["erf"]

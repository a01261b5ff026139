"""
Built-in distribution families for probcalc.

This package contains the Poisson, Hypergeometric, Continuous Uniform and
Normal families together with their engine functions.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from probcalc.families.builtins.continuous import (
    configure_normal_family,
    configure_uniform_family,
)
from probcalc.families.builtins.discrete import (
    configure_hypergeometric_family,
    configure_poisson_family,
)

__all__ = [
    "configure_hypergeometric_family",
    "configure_normal_family",
    "configure_poisson_family",
    "configure_uniform_family",
]

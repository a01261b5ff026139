"""
Built-in family set
===================

:func:`configure_families_register` creates the Poisson, Hypergeometric,
ContinuousUniform and Normal families once per process and puts them into
:class:`ParametricFamilyRegister`. Their characteristics are the same
engine functions exported at package level.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from probcalc.families.builtins import (
    configure_hypergeometric_family,
    configure_normal_family,
    configure_poisson_family,
    configure_uniform_family,
)
from probcalc.families.registry import ParametricFamilyRegister

_CONFIGURATORS = (
    configure_poisson_family,
    configure_hypergeometric_family,
    configure_uniform_family,
    configure_normal_family,
)


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """Register every built-in family; later calls return the same register."""
    for configure in _CONFIGURATORS:
        configure()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """Forget the configured register so the next configuration starts empty."""
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()

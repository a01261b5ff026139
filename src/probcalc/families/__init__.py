"""
Distribution families: the parametrization framework, the family register
and the built-in Poisson, Hypergeometric, ContinuousUniform and Normal
families.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from .distribution import ParametricFamilyDistribution
from .parametric_family import ParametricFamily
from .parametrizations import (
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)
from .registry import ParametricFamilyRegister
from .configuration import configure_families_register, reset_families_register  # isort: skip

__all__ = [
    "Parametrization",
    "ParametrizationConstraint",
    "constraint",
    "parametrization",
    "ParametricFamily",
    "ParametricFamilyDistribution",
    "ParametricFamilyRegister",
    "configure_families_register",
    "reset_families_register",
]

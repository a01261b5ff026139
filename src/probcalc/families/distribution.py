"""
Members of parametric families.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from dataclasses import dataclass
from typing import TYPE_CHECKING

from probcalc.families.registry import ParametricFamilyRegister

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from probcalc.distributions.support import Support
    from probcalc.families.parametric_family import ParametricFamily
    from probcalc.families.parametrizations import Parametrization
    from probcalc.types import EuclideanDistributionType, GenericCharacteristicName


@dataclass(frozen=True, slots=True)
class ParametricFamilyDistribution:
    """
    Family member with fixed, already validated parameters.

    Instances are produced by :meth:`ParametricFamily.distribution`. The
    family itself is looked up in the register by ``family_name`` so a
    distribution stays a plain value.

    Parameters
    ----------
    family_name : str
        Register key of the family.
    distribution_type : EuclideanDistributionType
        Kind and dimension.
    parametrization : Parametrization
        Parameters in the parametrization they were given in.
    support : Support or None
        Set of values with non-zero mass or density.
    """

    family_name: str
    distribution_type: EuclideanDistributionType
    parametrization: Parametrization
    support: Support | None

    @property
    def family(self) -> ParametricFamily:
        return ParametricFamilyRegister.get(self.family_name)

    @property
    def parameters(self) -> dict[str, Any]:
        return self.parametrization.parameters

    @property
    def parametrization_name(self) -> str:
        return self.parametrization.name

    def query_method(self, characteristic_name: GenericCharacteristicName) -> Callable[..., Any]:
        """Engine function for ``characteristic_name`` taking only the evaluation point."""
        return self.family.bind(characteristic_name, self.parametrization)

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any = None
    ) -> Any:
        """
        Evaluate ``characteristic_name`` at ``value``.

        Moments ignore ``value``. Raises ``KeyError`` for a characteristic
        the family does not provide.
        """
        return self.query_method(characteristic_name)(value)

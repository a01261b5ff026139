"""
Parametric families.

A :class:`ParametricFamily` ties together the parametrizations a
distribution can be described with, the engine functions that evaluate its
characteristics, and the support of each member.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from functools import partial
from typing import TYPE_CHECKING

from probcalc.families.distribution import ParametricFamilyDistribution

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, TypeAlias

    from probcalc.distributions.support import Support
    from probcalc.families.parametrizations import Parametrization
    from probcalc.types import (
        EuclideanDistributionType,
        GenericCharacteristicName,
        ParametrizationName,
    )

    CharacteristicFunc: TypeAlias = Callable[[Parametrization, Any], Any]
    SupportResolver: TypeAlias = Callable[[Parametrization], Support | None]


def _no_support(_: Parametrization) -> None:
    return None


class ParametricFamily:
    """
    Family of distributions sharing a type, parametrizations and engines.

    Parameters
    ----------
    name : str
        Registry key of the family.
    distr_type : EuclideanDistributionType
        Kind and dimension of every member.
    distr_parametrizations : list[ParametrizationName]
        Names the family can be parametrized by. The first one is the base
        parametrization that characteristic functions receive.
    distr_characteristics : dict[GenericCharacteristicName, CharacteristicFunc]
        Engine function per characteristic, called as ``func(base_params, value)``.
    support_by_parametrization : SupportResolver, optional
        Support of the member described by base parameters.

    Notes
    -----
    Parametrization classes attach themselves with
    :func:`probcalc.families.parametrizations.parametrization` after the
    family is created.
    """

    def __init__(
        self,
        name: str,
        distr_type: EuclideanDistributionType,
        distr_parametrizations: list[ParametrizationName],
        distr_characteristics: dict[GenericCharacteristicName, CharacteristicFunc],
        support_by_parametrization: SupportResolver | None = None,
    ):
        self._name = name
        self.distr_type = distr_type
        self.parametrization_names = list(distr_parametrizations)
        self.base_parametrization_name = self.parametrization_names[0]
        self.distr_characteristics = dict(distr_characteristics)
        self._support_resolver = support_by_parametrization or _no_support
        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

    @property
    def name(self) -> str:
        return self._name

    @property
    def parametrizations(self) -> dict[ParametrizationName, type[Parametrization]]:
        return self._parametrizations

    @property
    def base(self) -> type[Parametrization]:
        """Class of the base parametrization; ``ValueError`` until it is attached."""
        if self.base_parametrization_name not in self._parametrizations:
            raise ValueError(
                f"Base parametrization '{self.base_parametrization_name}' of family "
                f"{self.name} is not registered."
            )
        return self._parametrizations[self.base_parametrization_name]

    def register_parametrization(
        self,
        name: ParametrizationName,
        parametrization_class: type[Parametrization],
    ) -> None:
        if name not in self.parametrization_names:
            raise ValueError(f"Parametrization '{name}' is not declared by family {self.name}.")
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        self._parametrizations[name] = parametrization_class

    def get_parametrization(self, name: ParametrizationName) -> type[Parametrization]:
        return self._parametrizations[name]

    def to_base(self, parameters: Parametrization) -> Parametrization:
        if parameters.name == self.base_parametrization_name:
            return parameters
        return parameters.transform_to_base_parametrization()

    def support(self, parameters: Parametrization) -> Support | None:
        return self._support_resolver(self.to_base(parameters))

    def bind(
        self, characteristic: GenericCharacteristicName, parameters: Parametrization
    ) -> Callable[..., Any]:
        """
        Engine function of ``characteristic`` with the parameters applied.

        Raises
        ------
        KeyError
            If the family does not provide the characteristic.
        """
        if characteristic not in self.distr_characteristics:
            raise KeyError(
                f"Family {self.name} does not provide characteristic '{characteristic}'."
            )
        return partial(self.distr_characteristics[characteristic], self.to_base(parameters))

    def distribution(
        self,
        parametrization_name: ParametrizationName | None = None,
        **parameters_values: Any,
    ) -> ParametricFamilyDistribution:
        """
        Validated member of the family.

        Parameters
        ----------
        parametrization_name : str, optional
            Parametrization the values are given in, the base one by default.
        **parameters_values
            Parameter values by field name.

        Raises
        ------
        KeyError
            If ``parametrization_name`` is not registered.
        TypeError
            If a parameter is missing or unexpected.
        ValueError
            If a constraint of the parametrization does not hold.
        """
        parametrization_class = (
            self.base
            if parametrization_name is None
            else self.get_parametrization(parametrization_name)
        )
        parameters = parametrization_class(**parameters_values)
        parameters.validate()
        return ParametricFamilyDistribution(
            family_name=self.name,
            distribution_type=self.distr_type,
            parametrization=parameters,
            support=self.support(parameters),
        )

    __call__ = distribution

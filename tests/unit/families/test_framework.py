from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Any

import pytest

from probcalc.families import (
    ParametricFamily,
    ParametricFamilyRegister,
    Parametrization,
    configure_families_register,
    constraint,
    parametrization,
    reset_families_register,
)
from probcalc.types import CharacteristicName, FamilyName, UnivariateContinuous


def _make_family(name: str = "Toy") -> ParametricFamily:
    def pdf(parameters: Any, x: float) -> float:
        return 1.0 / parameters.width if 0 <= x <= parameters.width else 0.0

    def mean_func(parameters: Any, _: Any) -> float:
        return parameters.width / 2

    return ParametricFamily(
        name=name,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["width", "halfWidth"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.MEAN: mean_func,
        },
    )


class TestParametrizationDecorators:
    def setup_method(self) -> None:
        self.family = _make_family()

        @parametrization(family=self.family, name="width")
        class Width(Parametrization):
            width: float

            @constraint(description="width > 0")
            def check_width(self) -> bool:
                return self.width > 0

        @parametrization(family=self.family, name="halfWidth")
        class HalfWidth(Parametrization):
            half: float

            def transform_to_base_parametrization(self) -> Parametrization:
                return Width(width=2 * self.half)

        self.width_cls = Width
        self.half_width_cls = HalfWidth

    def test_parametrization_is_frozen_dataclass(self) -> None:
        params = self.width_cls(width=2.0)
        assert params.parameters == {"width": 2.0}
        assert params.name == "width"
        with pytest.raises(AttributeError):
            params.width = 3.0  # type: ignore[misc]

    def test_constraints_are_collected(self) -> None:
        assert [c.description for c in self.width_cls(width=1.0).constraints] == ["width > 0"]
        assert self.half_width_cls(half=1.0).constraints == []

    def test_validation(self) -> None:
        assert self.width_cls(width=1.0).is_valid
        invalid = self.width_cls(width=-1.0)
        assert not invalid.is_valid
        assert invalid.violated_constraints() == ["width > 0"]
        with pytest.raises(ValueError, match='Constraint "width > 0" does not hold'):
            invalid.validate()

    def test_registered_on_family(self) -> None:
        assert self.family.base is self.width_cls
        assert self.family.get_parametrization("halfWidth") is self.half_width_cls

    def test_duplicate_parametrization_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="already registered"):

            @parametrization(family=self.family, name="width")
            class Again(Parametrization):
                width: float

    def test_undeclared_parametrization_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="not declared"):

            @parametrization(family=self.family, name="other")
            class Other(Parametrization):
                value: float

    def test_static_constraint_is_rejected(self) -> None:
        family = _make_family()
        with pytest.raises(TypeError, match="instance method"):

            @parametrization(family=family, name="width")
            class Broken(Parametrization):
                width: float

                @staticmethod
                @constraint(description="always")
                def check() -> bool:
                    return True

    def test_characteristics_use_base_parameters(self) -> None:
        mean = self.family.bind(CharacteristicName.MEAN, self.half_width_cls(half=3.0))
        assert mean(None) == 3.0

    def test_unknown_characteristic(self) -> None:
        with pytest.raises(KeyError, match="cdf"):
            self.family.bind(CharacteristicName.CDF, self.width_cls(width=1.0))

    def test_distribution_factory(self) -> None:
        dist = self.family(half=2.0, parametrization_name="halfWidth")

        assert dist.parametrization_name == "halfWidth"
        assert dist.parameters == {"half": 2.0}
        assert dist.support is None
        with pytest.raises(ValueError, match="width > 0"):
            self.family(width=0.0)


class TestFamilyRegister:
    def test_singleton(self) -> None:
        assert ParametricFamilyRegister() is ParametricFamilyRegister()

    def test_register_and_get(self) -> None:
        family = _make_family("Custom")
        ParametricFamilyRegister.register(family)

        assert ParametricFamilyRegister.contains("Custom")
        assert ParametricFamilyRegister.get("Custom") is family
        with pytest.raises(ValueError, match="already found"):
            ParametricFamilyRegister.register(_make_family("Custom"))

    def test_unknown_family(self) -> None:
        with pytest.raises(ValueError, match="No family Missing found in register"):
            ParametricFamilyRegister.get("Missing")

    def test_configure_registers_builtin_families(self) -> None:
        registry = configure_families_register()

        assert set(registry.names()) == {
            FamilyName.POISSON,
            FamilyName.HYPERGEOMETRIC,
            FamilyName.CONTINUOUS_UNIFORM,
            FamilyName.NORMAL,
        }

    def test_configure_is_idempotent(self) -> None:
        first = configure_families_register()
        second = configure_families_register()

        assert first is second
        assert len(second.names()) == 4

    def test_reset(self) -> None:
        configure_families_register()
        reset_families_register()

        assert not ParametricFamilyRegister.contains(FamilyName.NORMAL)
        assert configure_families_register().contains(FamilyName.NORMAL)

    def test_distribution_resolves_family_through_registry(self) -> None:
        registry = configure_families_register()
        dist = registry.get(FamilyName.POISSON)(lam=2.0)

        assert dist.family is registry.get(FamilyName.POISSON)
        assert dist.calculate_characteristic(CharacteristicName.MEAN) == 2.0

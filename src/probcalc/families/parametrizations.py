"""
Parametrizations of distribution families.

A parametrization is a frozen dataclass holding one way of describing a
member of a family. Its validity rules are instance methods marked with
:func:`constraint`; :func:`parametrization` turns a class into such a
dataclass and attaches it to its family.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import dataclass, fields, is_dataclass
from functools import wraps
from inspect import isfunction
from typing import TYPE_CHECKING, ParamSpec

from probcalc.types import ParametrizationName

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from probcalc.families.parametric_family import ParametricFamily

P = ParamSpec("P")

_CONSTRAINT_FLAG = "__is_constraint"
_CONSTRAINT_DESCRIPTION = "__constraint_description"


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """Named predicate over a parametrization instance."""

    description: str
    check: Callable[[Any], bool]


class Parametrization(ABC):
    """
    Base class of all parametrizations.

    Subclasses declare their parameters as dataclass fields. ``__family__``,
    ``__param_name__`` and ``_constraints`` are filled in by
    :func:`parametrization`.
    """

    __family__: ClassVar[ParametricFamily]
    __param_name__: ClassVar[ParametrizationName]
    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    @property
    def name(self) -> ParametrizationName:
        return type(self).__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Field values keyed by field name, in declaration order."""
        return {f.name: getattr(self, f.name) for f in fields(self)}  # type: ignore[arg-type]

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        return self._constraints

    def violated_constraints(self) -> list[str]:
        return [c.description for c in self._constraints if not c.check(self)]

    @property
    def is_valid(self) -> bool:
        return not self.violated_constraints()

    def validate(self) -> None:
        """
        Check every constraint.

        Raises
        ------
        ValueError
            Naming the first constraint that does not hold.
        """
        for description in self.violated_constraints():
            raise ValueError(f'Constraint "{description}" does not hold')

    def transform_to_base_parametrization(self) -> Parametrization:
        """Equivalent parameters in the family's base parametrization."""
        return self


def constraint(description: str) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Mark an instance method as a validity rule of its parametrization.

    Parameters
    ----------
    description : str
        Text reported when the rule does not hold.
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> bool:
            return bool(func(*args, **kwargs))

        setattr(wrapper, _CONSTRAINT_FLAG, True)
        setattr(wrapper, _CONSTRAINT_DESCRIPTION, description)
        return wrapper

    return decorator


def _collect_constraints(cls: type[Parametrization]) -> list[ParametrizationConstraint]:
    collected = []
    for attr_name, attr in vars(cls).items():
        if isinstance(attr, staticmethod | classmethod):
            if getattr(attr.__func__, _CONSTRAINT_FLAG, False):
                raise TypeError(f"@constraint '{attr_name}' must be an instance method")
            continue
        if isfunction(attr) and getattr(attr, _CONSTRAINT_FLAG, False):
            collected.append(
                ParametrizationConstraint(
                    description=getattr(attr, _CONSTRAINT_DESCRIPTION), check=attr
                )
            )
    return collected


def parametrization(
    *,
    family: ParametricFamily,
    name: ParametrizationName,
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Class decorator attaching a parametrization to ``family`` under ``name``.

    The class becomes a frozen slotted dataclass unless it already is a
    dataclass, and its :func:`constraint` methods are collected.

    Raises
    ------
    ValueError
        If ``name`` is not declared by the family or is already attached.
    TypeError
        If a constraint is a static or class method.
    """

    def decorator(cls: type[Parametrization]) -> type[Parametrization]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)

        cls.__family__ = family
        cls.__param_name__ = name
        cls._constraints = _collect_constraints(cls)

        family.register_parametrization(name, cls)
        return cls

    return decorator

"""
Parametrizations
================

A parametrization is one way of writing down the parameters of a family
(location/scale, mean/std, ...). Each is a frozen dataclass produced by the
:func:`parametrization` decorator; its predicates marked with
:func:`constraint` are collected at decoration time and checked by
:meth:`Parametrization.validate`.

Field values are promoted to one common floating dtype on construction, see
:func:`promote_parameters`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numbers
from abc import ABC
from dataclasses import dataclass, fields
from inspect import isfunction
from typing import TYPE_CHECKING

import numpy as np

from logistic_core.errors import InvalidParameterError

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from typing import Any, ClassVar

    from logistic_core.families.parametric_family import ParametricFamily
    from logistic_core.types import ParametrizationName, RealDType

_CONSTRAINT_MARK = "__constraint__"


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Predicate over a parametrization instance.

    ``parameter`` names the field reported when ``check`` fails; ``None``
    means the constraint concerns the parameters as a whole.
    """

    description: str
    check: Callable[[Any], bool]
    parameter: str | None = None


def promote_parameters(values: Mapping[str, Any]) -> tuple[dict[str, Any], RealDType]:
    """
    Convert parameter values to numpy scalars of one floating dtype.

    Parameters
    ----------
    values : Mapping[str, Any]
        Raw values keyed by parameter name.

    Returns
    -------
    tuple[dict[str, Any], numpy.dtype]
        The converted values and their common dtype.

    Raises
    ------
    InvalidParameterError
        If a value is not a real number.

    Notes
    -----
    The dtype is ``numpy.result_type`` of the values, with Python floats read
    as ``float64`` and Python ints left weak, so ``(float32, 2)`` stays
    ``float32``. A non-floating result (only integers or booleans) becomes
    ``float64``.
    """
    typed: dict[str, Any] = {}
    for name, value in values.items():
        if isinstance(value, (np.integer, np.floating, np.bool_, int)):
            typed[name] = value
        elif isinstance(value, numbers.Real):
            typed[name] = np.float64(value)
        else:
            raise InvalidParameterError(name, value, f"{name} is real")

    dtype = np.result_type(*typed.values()) if typed else np.dtype(np.float64)
    if not np.issubdtype(dtype, np.floating):
        dtype = np.dtype(np.float64)
    return {name: dtype.type(value) for name, value in typed.items()}, dtype


class Parametrization(ABC):
    """
    Base class of the parameter objects of a family.

    Subclasses declare their parameters as dataclass fields and override
    :meth:`transform_to_base_parametrization` unless they are the base.
    """

    # Filled in by @parametrization
    __family__: ClassVar[ParametricFamily]
    __param_name__: ClassVar[ParametrizationName]
    _constraints: ClassVar[tuple[ParametrizationConstraint, ...]] = ()

    def __post_init__(self) -> None:
        promoted, _ = promote_parameters(self.parameters)
        for name, value in promoted.items():
            object.__setattr__(self, name, value)

    @property
    def name(self) -> ParametrizationName:
        return type(self).__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Field values in declaration order."""
        return {f.name: getattr(self, f.name) for f in fields(self)}  # type: ignore[arg-type]

    @property
    def dtype(self) -> RealDType:
        """Floating dtype shared by every field."""
        return promote_parameters(self.parameters)[1]

    @property
    def constraints(self) -> tuple[ParametrizationConstraint, ...]:
        return self._constraints

    def validate(self) -> None:
        """
        Raises
        ------
        InvalidParameterError
            For the first constraint whose check fails.
        """
        for rule in self._constraints:
            if rule.check(self):
                continue
            if rule.parameter is None:
                raise InvalidParameterError(self.name, self.parameters, rule.description)
            raise InvalidParameterError(
                rule.parameter, getattr(self, rule.parameter), rule.description
            )

    def transform_to_base_parametrization(self) -> Parametrization:
        """Equivalent parameters in the base parametrization; the base returns itself."""
        return self


def constraint(
    description: str, parameter: str | None = None
) -> Callable[[Callable[[Any], Any]], Callable[[Any], Any]]:
    """
    Mark a parametrization method as a constraint.

    The method takes only ``self`` and returns something truthy when the
    constraint holds. ``parameter`` names the field blamed on failure.
    """

    def mark(check: Callable[[Any], Any]) -> Callable[[Any], Any]:
        setattr(check, _CONSTRAINT_MARK, (description, parameter))
        return check

    return mark


def _collect_constraints(cls: type) -> tuple[ParametrizationConstraint, ...]:
    found = []
    for attr_name, attr in vars(cls).items():
        if isinstance(attr, (staticmethod, classmethod)) and hasattr(
            attr.__func__, _CONSTRAINT_MARK
        ):
            raise TypeError(f"@constraint '{attr_name}' must be an instance method")
        if isfunction(attr) and hasattr(attr, _CONSTRAINT_MARK):
            description, parameter = getattr(attr, _CONSTRAINT_MARK)
            found.append(
                ParametrizationConstraint(
                    description, lambda obj, fn=attr: bool(fn(obj)), parameter
                )
            )
    return tuple(found)


def parametrization(
    *, family: ParametricFamily, name: ParametrizationName
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Class decorator registering a parametrization with ``family``.

    The class becomes a frozen, slotted dataclass (unless it already is a
    dataclass) and its ``@constraint`` methods are collected in declaration
    order.
    """

    def register(cls: type[Parametrization]) -> type[Parametrization]:
        if "__dataclass_fields__" not in cls.__dict__:
            cls = dataclass(slots=True, frozen=True)(cls)
        cls.__family__ = family
        cls.__param_name__ = name
        cls._constraints = _collect_constraints(cls)
        family.register_parametrization(name, cls)
        return cls

    return register

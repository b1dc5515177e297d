"""
Parametric Families
===================

:class:`ParametricFamily` ties together the parametrizations of a family, its
closed-form characteristics and the strategies its distributions use.

A characteristic may be written for several parametrizations. When a
distribution is built, each characteristic is bound to the form written for
the distribution's own parametrization if there is one, and otherwise to the
base form evaluated on the converted parameters. That choice is made once per
parametrization, in the constructor.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import partial
from typing import TYPE_CHECKING

from logistic_core.distributions.computation import AnalyticalComputation
from logistic_core.distributions.strategies import (
    AnalyticalComputationStrategy,
    InverseTransformSamplingStrategy,
)
from logistic_core.families.distribution import ParametricFamilyDistribution

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from typing import Any

    from logistic_core.distributions.strategies import ComputationStrategy, SamplingStrategy
    from logistic_core.distributions.support import ContinuousSupport
    from logistic_core.families.parametrizations import Parametrization
    from logistic_core.types import (
        DistributionType,
        GenericCharacteristicName,
        ParametrizationName,
    )

    type ParametrizedFunction = Callable[..., Any]
    type SupportResolver = Callable[[Parametrization], ContinuousSupport]


class ParametricFamily:
    """
    A named family of distributions with one or more parametrizations.

    Parameters
    ----------
    name : str
        Family name, the key in :class:`ParametricFamilyRegister`.
    distr_type : DistributionType
        Type shared by every member of the family.
    distr_parametrizations : list[ParametrizationName]
        Parametrization names; the first one is the base.
    distr_characteristics : Mapping
        Characteristic name to either a function of ``(parameters, value)``
        written for the base parametrization, or a mapping from
        parametrization names to such functions.
    support_by_parametrization : Callable[[Parametrization], ContinuousSupport]
        Support of the distribution with the given parameters.
    sampling_strategy, computation_strategy : optional
        Default to inverse transform sampling and analytical computation.
    distribution_class : type[ParametricFamilyDistribution], optional
        Class of the instances built by :meth:`distribution`.
    """

    def __init__(
        self,
        name: str,
        distr_type: DistributionType,
        distr_parametrizations: list[ParametrizationName],
        distr_characteristics: Mapping[
            GenericCharacteristicName,
            Mapping[ParametrizationName, ParametrizedFunction] | ParametrizedFunction,
        ],
        support_by_parametrization: SupportResolver,
        sampling_strategy: SamplingStrategy | None = None,
        computation_strategy: ComputationStrategy | None = None,
        distribution_class: type[ParametricFamilyDistribution] = ParametricFamilyDistribution,
    ):
        self._name = name
        self.distribution_type = distr_type
        self.parametrization_names = list(distr_parametrizations)
        self.base_parametrization_name = self.parametrization_names[0]
        self.support_resolver = support_by_parametrization
        self.sampling_strategy = sampling_strategy or InverseTransformSamplingStrategy()
        self.computation_strategy = computation_strategy or AnalyticalComputationStrategy()
        self.distribution_class = distribution_class
        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

        self.distr_characteristics = {
            characteristic: (
                dict(forms)
                if isinstance(forms, dict)
                else {self.base_parametrization_name: forms}
            )
            for characteristic, forms in distr_characteristics.items()
        }

        # parametrization -> characteristic -> parametrization whose form is used
        self._analytical_plan: dict[
            ParametrizationName, dict[GenericCharacteristicName, ParametrizationName]
        ] = {}
        for pname in self.parametrization_names:
            chosen = {}
            for characteristic, forms in self.distr_characteristics.items():
                if pname in forms:
                    chosen[characteristic] = pname
                elif self.base_parametrization_name in forms:
                    chosen[characteristic] = self.base_parametrization_name
            self._analytical_plan[pname] = chosen

    @property
    def name(self) -> str:
        return self._name

    @property
    def parametrizations(self) -> dict[ParametrizationName, type[Parametrization]]:
        return self._parametrizations

    @property
    def base(self) -> type[Parametrization]:
        """
        Raises
        ------
        ValueError
            If the base parametrization class has not been registered yet.
        """
        try:
            return self._parametrizations[self.base_parametrization_name]
        except KeyError:
            raise ValueError(
                f"Base parametrization '{self.base_parametrization_name}' is not registered"
            ) from None

    def register_parametrization(
        self, name: ParametrizationName, parametrization_class: type[Parametrization]
    ) -> None:
        """
        Raises
        ------
        ValueError
            If ``name`` is not declared by the family or is already taken.
        """
        if name not in self.parametrization_names:
            raise ValueError(f"Family {self.name} declares no parametrization '{name}'")
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered")
        self._parametrizations[name] = parametrization_class

    def to_base(self, parameters: Parametrization) -> Parametrization:
        """
        Express ``parameters`` in the base parametrization.

        A converted result is validated against the base constraints, so
        conversions that overflow or leave the base domain are rejected.

        Raises
        ------
        InvalidParameterError
            If the converted parameters violate a base constraint.
        """
        if parameters.name == self.base_parametrization_name:
            return parameters
        base = parameters.transform_to_base_parametrization()
        base.validate()
        return base

    def make_parameters(
        self, parametrization_name: ParametrizationName | None = None, **values: Any
    ) -> Parametrization:
        """
        Build parameters that are valid both as given and in the base form.

        Raises
        ------
        KeyError
            If ``parametrization_name`` is unknown.
        InvalidParameterError
            If a value is not real or a constraint fails.
        """
        if parametrization_name is None:
            cls = self.base
        else:
            cls = self._parametrizations[parametrization_name]
        parameters = cls(**values)
        parameters.validate()
        self.to_base(parameters)
        return parameters

    def _build_analytical_computations(
        self, parameters: Parametrization
    ) -> dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        base: Parametrization | None = None
        computations: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]] = {}
        for characteristic, provider in self._analytical_plan.get(parameters.name, {}).items():
            if provider == parameters.name:
                bound = parameters
            else:
                base = base or self.to_base(parameters)
                bound = base
            func = self.distr_characteristics[characteristic][provider]
            computations[characteristic] = AnalyticalComputation(
                target=characteristic, func=partial(func, bound)
            )
        return computations

    def distribution(
        self, parametrization_name: ParametrizationName | None = None, **values: Any
    ) -> ParametricFamilyDistribution:
        """
        Build a member of the family.

        Parameters
        ----------
        parametrization_name : str, optional
            Parametrization the values are given in; the base by default.
        **values
            Parameter values.

        Returns
        -------
        ParametricFamilyDistribution
            An instance of :attr:`distribution_class`.

        Raises
        ------
        KeyError
            If ``parametrization_name`` is unknown.
        InvalidParameterError
            If the values are invalid.
        """
        parameters = self.make_parameters(parametrization_name, **values)
        return self.distribution_class.from_parameters(self, parameters)

    __call__ = distribution

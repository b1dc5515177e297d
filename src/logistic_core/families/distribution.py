"""
Members of a parametric family.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Self

from logistic_core.distributions.distribution import Distribution

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from logistic_core.distributions.computation import AnalyticalComputation
    from logistic_core.distributions.strategies import ComputationStrategy, SamplingStrategy
    from logistic_core.distributions.support import ContinuousSupport
    from logistic_core.families.parametric_family import ParametricFamily
    from logistic_core.families.parametrizations import Parametrization
    from logistic_core.types import (
        DistributionType,
        GenericCharacteristicName,
        ParametrizationName,
    )


@dataclass(frozen=True, slots=True)
class ParametricFamilyDistribution(Distribution):
    """
    Immutable distribution with fixed parameters from a family.

    The instance keeps the family object it was built by, so it stays usable
    when the global register is reset. Equal family and equal parameters mean
    equal instances.
    """

    family: ParametricFamily = field(repr=False)
    parameters: Parametrization
    _computations: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]] | None = (
        field(default=None, init=False, repr=False, compare=False)
    )

    @classmethod
    def from_parameters(cls, family: ParametricFamily, parameters: Parametrization) -> Self:
        """Build an instance from validated parameters, bypassing subclass ``__init__``."""
        instance = cls.__new__(cls)
        ParametricFamilyDistribution.__init__(instance, family, parameters)
        return instance

    @property
    def family_name(self) -> str:
        return self.family.name

    @property
    def parametrization_name(self) -> ParametrizationName:
        return self.parameters.name

    @property
    def base_parameters(self) -> Parametrization:
        return self.family.to_base(self.parameters)

    @property
    def distribution_type(self) -> DistributionType:
        return self.family.distribution_type

    @property
    def support(self) -> ContinuousSupport:
        return self.family.support_resolver(self.parameters)

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Bound closed forms, built on first access and kept for the instance's lifetime."""
        if self._computations is None:
            object.__setattr__(
                self, "_computations", self.family._build_analytical_computations(self.parameters)
            )
        return self._computations  # type: ignore[return-value]

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return self.family.sampling_strategy

    @property
    def computation_strategy(self) -> ComputationStrategy:
        return self.family.computation_strategy

"""
Distribution Interface
======================

:class:`Distribution` is the capability set shared by every distribution:
its type, support, closed-form characteristics and the two strategies that
evaluate them and draw samples. Implementations only provide the
properties; the methods below are inherited.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

from logistic_core.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from logistic_core.distributions.computation import AnalyticalComputation
    from logistic_core.distributions.sampling import ArraySample
    from logistic_core.distributions.strategies import ComputationStrategy, SamplingStrategy
    from logistic_core.distributions.support import ContinuousSupport
    from logistic_core.types import DistributionType, GenericCharacteristicName


@runtime_checkable
class Distribution(Protocol):
    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    def support(self) -> ContinuousSupport: ...

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]: ...

    @property
    def computation_strategy(self) -> ComputationStrategy: ...

    @property
    def sampling_strategy(self) -> SamplingStrategy: ...

    def query_method(
        self, characteristic_name: GenericCharacteristicName, **options: Any
    ) -> AnalyticalComputation[Any, Any]:
        return self.computation_strategy.query_method(characteristic_name, self, **options)

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any, **options: Any
    ) -> Any:
        """Evaluate ``characteristic_name`` at ``value``; options go to the formula."""
        return self.query_method(characteristic_name)(value, **options)

    def sample(self, n: int, **options: Any) -> ArraySample:
        return self.sampling_strategy.sample(n, distr=self, **options)

    def log_likelihood(self, sample: ArraySample) -> float:
        """
        Sum of ``logpdf`` over a univariate sample.

        Falls back to ``log(pdf)`` when no ``logpdf`` is published. Points
        outside the support contribute ``-inf``.
        """
        values = sample.ravel()
        if CharacteristicName.LOGPDF in self.analytical_computations:
            terms = np.asarray(self.calculate_characteristic(CharacteristicName.LOGPDF, values))
        else:
            with np.errstate(divide="ignore"):
                terms = np.log(self.calculate_characteristic(CharacteristicName.PDF, values))
        return float(np.sum(np.where(self.support.contains(values), terms, -np.inf)))

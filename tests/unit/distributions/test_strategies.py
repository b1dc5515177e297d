from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging

import pytest

from logistic_core.distributions.strategies import AnalyticalComputationStrategy
from logistic_core.families import LogisticDistribution
from logistic_core.types import CharacteristicName
from tests.utils.families import partial_logistic_family


class TestAnalyticalComputationStrategy:
    strategy = AnalyticalComputationStrategy()

    def test_returns_the_published_computation(self) -> None:
        distr = LogisticDistribution(1.0, 2.0)

        method = self.strategy.query_method(CharacteristicName.CDF, distr)

        assert method is distr.analytical_computations[CharacteristicName.CDF]
        assert method(1.0) == 0.5

    def test_unknown_characteristic_raises_and_logs(self, caplog) -> None:
        distr = LogisticDistribution()

        with caplog.at_level(logging.DEBUG, logger="logistic_core.distributions.strategies"):
            with pytest.raises(RuntimeError, match="'hazard'"):
                self.strategy.query_method("hazard", distr)
        assert any("'hazard'" in record.getMessage() for record in caplog.records)

    def test_sampling_needs_ppf(self, rng) -> None:
        family = partial_logistic_family("LogisticCdfOnly", CharacteristicName.CDF)
        distr = family(location=0.0, scale=1.0)

        assert distr.calculate_characteristic(CharacteristicName.CDF, 0.0) == 0.5
        with pytest.raises(RuntimeError, match="'ppf'"):
            distr.sample(3, rng=rng)

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import logistic

from logistic_core.distributions import (
    AnalyticalComputation,
    ArraySample,
    Distribution,
)
from logistic_core.families import LogisticDistribution
from logistic_core.types import CharacteristicName, UnivariateContinuous
from tests.utils.families import partial_logistic_family


class TestDistributionProtocol:
    def test_logistic_satisfies_protocol(self) -> None:
        distr = LogisticDistribution(1.0, 2.0)

        assert isinstance(distr, Distribution)
        assert distr.distribution_type == UnivariateContinuous
        assert distr.distribution_type.dimension == 1

    def test_calculate_characteristic_forwards_options(self) -> None:
        distr = LogisticDistribution()

        assert distr.calculate_characteristic(CharacteristicName.KURT, None) == pytest.approx(4.2)
        assert distr.calculate_characteristic(
            CharacteristicName.KURT, None, excess=True
        ) == pytest.approx(1.2)

    def test_query_method_returns_bound_computation(self) -> None:
        distr = LogisticDistribution(0.0, 2.0)

        method = distr.query_method(CharacteristicName.PDF)

        assert isinstance(method, AnalyticalComputation)
        assert method.target == CharacteristicName.PDF
        assert method(0.0) == pytest.approx(0.125)


class TestLogLikelihood:
    points = np.array([[-3.0], [0.5], [2.0], [40.0]])

    def test_sum_of_logpdf(self) -> None:
        distr = LogisticDistribution(0.5, 1.5)

        result = distr.log_likelihood(ArraySample(self.points))

        expected = logistic.logpdf(self.points.ravel(), loc=0.5, scale=1.5).sum()
        assert result == pytest.approx(expected, rel=1e-12)

    def test_falls_back_to_log_of_pdf(self) -> None:
        family = partial_logistic_family("LogisticPdfOnly", CharacteristicName.PDF)
        distr = family(location=0.5, scale=1.5)

        assert CharacteristicName.LOGPDF not in distr.analytical_computations
        assert distr.log_likelihood(ArraySample(self.points)) == pytest.approx(
            LogisticDistribution(0.5, 1.5).log_likelihood(ArraySample(self.points)), rel=1e-12
        )

    def test_point_outside_support_gives_minus_inf(self) -> None:
        sample = ArraySample(np.array([[0.0], [math.inf]]))

        assert LogisticDistribution().log_likelihood(sample) == -math.inf

    def test_empty_sample(self) -> None:
        assert LogisticDistribution().log_likelihood(ArraySample(np.empty((0, 1)))) == 0.0

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest

from logistic_core.families import (
    LogisticDistribution,
    ParametricFamilyDistribution,
    ParametricFamilyRegister,
    logistic_family,
    logistic_from_std,
    reset_families_register,
)
from logistic_core.types import CharacteristicName, FamilyName
from tests.utils.families import partial_logistic_family


class TestAnalyticalPlan:
    def test_own_form_is_preferred_over_base(self) -> None:
        plan = logistic_family()._analytical_plan

        assert plan["meanStd"][CharacteristicName.STD] == "meanStd"
        assert plan["meanStd"][CharacteristicName.VAR] == "locationScale"
        assert plan["meanVar"][CharacteristicName.VAR] == "meanVar"
        assert plan["meanVar"][CharacteristicName.CDF] == "locationScale"

    def test_std_is_read_back_exactly_from_mean_std(self) -> None:
        dist = logistic_from_std(0.1, mean=2.0)

        assert dist.std() == 0.1
        assert dist.var() == pytest.approx(0.01)

    def test_every_parametrization_publishes_every_characteristic(self) -> None:
        family = logistic_family()
        names = {
            name: set(family(name).analytical_computations) for name in family.parametrization_names
        }

        assert names["locationScale"] == names["meanStd"] == names["meanVar"]
        assert len(names["locationScale"]) == len(CharacteristicName)

    def test_base_is_required_before_building(self) -> None:
        family = partial_logistic_family("LogisticNoBase", CharacteristicName.PDF)
        family.parametrizations.clear()

        with pytest.raises(ValueError, match="'locationScale' is not registered"):
            family.distribution(location=0.0, scale=1.0)


class TestFamilyDistribution:
    def test_family_builds_its_distribution_class(self) -> None:
        dist = logistic_family()(location=1.0, scale=2.0)

        assert type(dist) is LogisticDistribution
        assert dist == LogisticDistribution(1.0, 2.0)

    def test_default_distribution_class(self) -> None:
        dist = partial_logistic_family("LogisticPlain", CharacteristicName.CDF)(scale=2.0)

        assert type(dist) is ParametricFamilyDistribution
        assert dist.family_name == "LogisticPlain"
        assert dist.calculate_characteristic(CharacteristicName.CDF, 0.0) == 0.5

    def test_computations_are_built_once(self) -> None:
        dist = LogisticDistribution(0.0, 3.0)

        first = dist.analytical_computations
        assert dist.analytical_computations is first
        assert first[CharacteristicName.ENTROPY](None) == pytest.approx(math.log(3.0) + 2)

    def test_distribution_keeps_its_family_after_reset(self) -> None:
        dist = LogisticDistribution(2.0, 0.5)
        family = dist.family

        reset_families_register()

        assert not ParametricFamilyRegister.contains(FamilyName.LOGISTIC)
        assert dist.family is family
        assert dist.location == 2.0
        assert dist.scale == 0.5
        assert dist.cdf(2.0) == 0.5

    def test_parameters_survive_reconfiguration(self) -> None:
        dist = logistic_from_std(1.0)
        reset_families_register()
        again = logistic_from_std(1.0)

        assert again.family is not dist.family
        assert again == dist

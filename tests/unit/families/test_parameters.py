from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import is_dataclass
from typing import Any

import numpy as np
import pytest

from logistic_core.errors import InvalidParameterError
from logistic_core.families import (
    ParametrizationConstraint,
    constraint,
    logistic_family,
    parametrization,
    promote_parameters,
)
from logistic_core.families.parametrizations import Parametrization
from tests.utils.families import partial_logistic_family


class TestLogisticParametrizations:
    def test_parametrization_classes_are_frozen_dataclasses(self) -> None:
        family = logistic_family()

        for name, cls in family.parametrizations.items():
            assert is_dataclass(cls)
            assert cls.__param_name__ == name
            assert cls.__family__ is family
        assert family.base is family.parametrizations["locationScale"]

    def test_constraints_are_collected_in_declaration_order(self) -> None:
        constraints = logistic_family().base().constraints

        assert all(isinstance(c, ParametrizationConstraint) for c in constraints)
        assert [c.description for c in constraints] == [
            "scale > 0 and finite",
            "location is finite",
        ]
        assert [c.parameter for c in constraints] == ["scale", "location"]

    def test_parameters_follow_field_order(self) -> None:
        params = logistic_family().make_parameters("meanVar", mean=1, var=3)

        assert params.name == "meanVar"
        assert params.parameters == {"mean": 1.0, "var": 3.0}
        assert params.dtype == np.float64

    def test_validate_reports_the_failing_parameter(self) -> None:
        family = logistic_family()

        with pytest.raises(InvalidParameterError) as excinfo:
            family.make_parameters(location=0.0, scale=-3)

        assert excinfo.value.parameter == "scale"
        assert excinfo.value.value == -3.0
        assert excinfo.value.constraint == "scale > 0 and finite"
        assert str(excinfo.value) == (
            'Constraint "scale > 0 and finite" does not hold for scale=np.float64(-3.0)'
        )

    @pytest.mark.parametrize(
        "name, values, expected",
        [
            ("meanStd", {"mean": 1.0, "std": math.pi / math.sqrt(3)}, (1.0, 1.0)),
            ("meanVar", {"mean": -1.0, "var": math.pi**2 / 3 * 4}, (-1.0, 2.0)),
        ],
        ids=["mean_std", "mean_var"],
    )
    def test_to_base_converts_to_location_scale(self, name, values, expected) -> None:
        family = logistic_family()

        base = family.to_base(family.make_parameters(name, **values))

        assert base.name == "locationScale"
        assert base.location == pytest.approx(expected[0])  # type: ignore[attr-defined]
        assert base.scale == pytest.approx(expected[1])  # type: ignore[attr-defined]

    def test_to_base_of_base_is_identity(self) -> None:
        family = logistic_family()
        params = family.make_parameters(location=1.0, scale=2.0)

        assert family.to_base(params) is params

    @pytest.mark.parametrize(
        "name, values",
        [
            ("meanVar", {"var": 1e308}),
            ("meanStd", {"std": 1.5e308}),
        ],
        ids=["var_overflows_scale", "std_overflows_scale"],
    )
    def test_overflowing_conversion_is_rejected(self, name, values) -> None:
        with pytest.raises(InvalidParameterError) as excinfo:
            logistic_family().make_parameters(name, **values)

        assert excinfo.value.parameter == "scale"
        assert excinfo.value.value == math.inf

    def test_unknown_parametrization_name(self) -> None:
        with pytest.raises(KeyError):
            logistic_family().make_parameters("shapeRate", shape=1.0)


class TestParametrizationDecorator:
    def test_constraint_marks_without_wrapping(self) -> None:
        def check(self: Any) -> bool:
            return True

        assert constraint("always", parameter="scale")(check) is check

    def test_registering_an_undeclared_name_is_rejected(self) -> None:
        family = partial_logistic_family("LogisticUndeclared")

        with pytest.raises(ValueError, match="declares no parametrization 'meanStd'"):

            @parametrization(family=family, name="meanStd")
            class MeanStd(Parametrization):
                mean: float = 0.0
                std: float = 1.0

    def test_registering_twice_is_rejected(self) -> None:
        family = partial_logistic_family("LogisticTwice")

        with pytest.raises(ValueError, match="already registered"):

            @parametrization(family=family, name="locationScale")
            class Again(Parametrization):
                location: float = 0.0
                scale: float = 1.0

    def test_static_constraint_is_rejected(self) -> None:
        family = partial_logistic_family("LogisticStatic")
        family.parametrizations.clear()

        with pytest.raises(TypeError, match="instance method"):

            @parametrization(family=family, name="locationScale")
            class LocationScale(Parametrization):
                location: float = 0.0
                scale: float = 1.0

                @staticmethod
                @constraint("scale > 0", parameter="scale")
                def check_scale(params: Any) -> bool:
                    return params.scale > 0

    def test_fields_are_promoted_on_construction(self) -> None:
        base = partial_logistic_family("LogisticPromoted").base

        params = base(location=np.float32(1.0), scale=2)  # type: ignore[call-arg]

        assert isinstance(params.scale, np.float32)  # type: ignore[attr-defined]
        assert params.dtype == np.float32


class TestParameterPromotion:
    def test_integers_become_float64(self) -> None:
        values, dtype = promote_parameters({"location": 1, "scale": 2})

        assert dtype == np.float64
        assert all(isinstance(v, np.float64) for v in values.values())
        assert values == {"location": 1.0, "scale": 2.0}

    def test_booleans_become_float64(self) -> None:
        values, dtype = promote_parameters({"location": True, "scale": np.int32(3)})

        assert dtype == np.float64
        assert values["location"] == 1.0

    def test_same_float_type_is_kept(self) -> None:
        _, dtype = promote_parameters({"location": np.float32(0.5), "scale": np.float32(2)})

        assert dtype == np.float32

    def test_python_integer_adopts_float32(self) -> None:
        values, dtype = promote_parameters({"location": np.float32(0.5), "scale": 2})

        assert dtype == np.float32
        assert isinstance(values["scale"], np.float32)

    @pytest.mark.parametrize(
        "other",
        [2.0, np.float64(2.0), np.int64(2)],
        ids=["python_float", "float64", "int64"],
    )
    def test_mixed_precision_is_widened(self, other: Any) -> None:
        _, dtype = promote_parameters({"location": np.float32(0.5), "scale": other})

        assert dtype == np.float64

    @pytest.mark.parametrize(
        "bad", [1j, "1.0", None, [1.0]], ids=["complex", "str", "none", "list"]
    )
    def test_non_real_values_are_rejected(self, bad: Any) -> None:
        with pytest.raises(InvalidParameterError) as excinfo:
            promote_parameters({"location": 0.0, "scale": bad})

        assert excinfo.value.parameter == "scale"
        assert excinfo.value.constraint == "scale is real"

"""
Parametric Families module for working with statistical distribution families.

This package provides the framework for defining, managing, and working with
parametric families of statistical distributions, and the built-in Logistic
family.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from .builtins import (
    LogisticDistribution,
    logistic_distribution,
    logistic_family,
    logistic_from_config,
    logistic_from_std,
    logistic_from_var,
)
from .configuration import configure_families_register, reset_families_register
from .distribution import ParametricFamilyDistribution
from .parametric_family import ParametricFamily
from .parametrizations import (
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
    promote_parameters,
)
from .registry import ParametricFamilyRegister

__all__ = [
    "ParametricFamilyRegister",
    "ParametrizationConstraint",
    "Parametrization",
    "ParametricFamily",
    "ParametricFamilyDistribution",
    "constraint",
    "parametrization",
    "promote_parameters",
    "configure_families_register",
    "reset_families_register",
    "LogisticDistribution",
    "logistic_distribution",
    "logistic_family",
    "logistic_from_config",
    "logistic_from_std",
    "logistic_from_var",
]

"""
Built-in continuous distribution families.

This module contains implementations of continuous parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from logistic_core.families.builtins.continuous.logistic import (
    LogisticDistribution,
    configure_logistic_family,
    logistic_distribution,
    logistic_family,
    logistic_from_config,
    logistic_from_std,
    logistic_from_var,
)

__all__ = [
    "LogisticDistribution",
    "configure_logistic_family",
    "logistic_distribution",
    "logistic_family",
    "logistic_from_config",
    "logistic_from_std",
    "logistic_from_var",
]

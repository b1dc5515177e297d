"""
Built-in distribution families for logistic-core.

This package contains implementations of standard statistical distribution families
that are available by default.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from logistic_core.families.builtins.continuous import (
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

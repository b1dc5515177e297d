"""
Distribution Families Configuration
====================================

This module defines and configures parametric distribution families for logistic-core:

- :class:`Logistic Family` — Logistic distribution with location-scale,
  mean-std and mean-variance parameterizations.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Each family supports multiple parameterizations with automatic conversions.
- Every characteristic of the built-in families is analytical.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from logistic_core.families.builtins import configure_logistic_family
from logistic_core.families.registry import ParametricFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all distribution families in the global registry.

    This function initializes all parametric families with their respective
    parameterizations, characteristics, and sampling strategies. It should be
    called during application startup to make distributions available.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_logistic_family()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()

"""
Process-wide register of parametric families, keyed by family name.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import ClassVar

    from logistic_core.families.parametric_family import ParametricFamily

logger = logging.getLogger(__name__)


class ParametricFamilyRegister:
    """
    Singleton holding every configured family.

    All operations are class methods working on the single instance;
    ``ParametricFamilyRegister()`` returns that instance.
    """

    _instance: ClassVar[ParametricFamilyRegister | None] = None
    _families: dict[str, ParametricFamily]

    def __new__(cls) -> ParametricFamilyRegister:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._families = {}
        return cls._instance

    @classmethod
    def contains(cls, name: str) -> bool:
        return name in cls()._families

    @classmethod
    def get(cls, name: str) -> ParametricFamily:
        """
        Raises
        ------
        ValueError
            If no family is registered under ``name``.
        """
        try:
            return cls()._families[name]
        except KeyError:
            raise ValueError(f"No family {name} found in register") from None

    @classmethod
    def register(cls, family: ParametricFamily) -> None:
        """
        Raises
        ------
        ValueError
            If the family name is already registered.
        """
        families = cls()._families
        if family.name in families:
            raise ValueError(f"Family {family.name} is already registered")
        families[family.name] = family
        logger.debug(
            "Registered family %s with parametrizations %s",
            family.name,
            family.parametrization_names,
        )

    @classmethod
    def list_registered_families(cls) -> list[str]:
        return list(cls()._families)

    @classmethod
    def _reset(cls) -> None:
        logger.debug("Dropping %d registered families", len(cls()._families))
        cls._instance = None

"""
Analytical characteristics bound to a distribution.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from mypy_extensions import KwArg

from logistic_core.types import GenericCharacteristicName


@dataclass(frozen=True, slots=True)
class AnalyticalComputation[In, Out]:
    """
    Closed-form characteristic of one distribution.

    Parameters
    ----------
    target : str
        Characteristic name, e.g. ``"pdf"``.
    func : Callable[[In, KwArg(Any)], Out]
        Function of the point(s) of evaluation. Keyword options are passed
        through, e.g. ``excess`` for the kurtosis.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        return self.func(data, **options)

"""
Supports of univariate continuous distributions.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from math import inf
from typing import TYPE_CHECKING, Any

import numpy as np

if TYPE_CHECKING:
    from logistic_core.types import Number, NumericArray


@dataclass(frozen=True, slots=True)
class ContinuousSupport:
    """
    Open interval ``(minimum, maximum)``; the real line by default.

    Infinite endpoints are limits, so ``±inf`` never belongs to the support,
    and neither does NaN.
    """

    minimum: float = -inf
    maximum: float = inf

    def contains(self, x: Number | NumericArray) -> Any:
        """Element-wise membership; a plain ``bool`` for scalar input."""
        arr = np.asarray(x)
        result = (arr > self.minimum) & (arr < self.maximum)
        if result.ndim == 0:
            return bool(result)
        return result

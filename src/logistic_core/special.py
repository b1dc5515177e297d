"""
Numerically stable special functions
====================================

Element-wise primitives used by the closed forms of the Logistic family.
Each one avoids the overflow or cancellation of its textbook formula:

- :func:`logistic` — ``1 / (1 + exp(-x))``
- :func:`logit` — ``log(p / (1 - p))``
- :func:`log1pexp` — ``log(1 + exp(x))`` (softplus)
- :func:`logexpm1` — ``log(exp(x) - 1)`` (inverse softplus)
- :func:`sinc` — normalized ``sin(pi*y) / (pi*y)`` with ``sinc(0) = 1``
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import expit
from scipy.special import logit as _logit

if TYPE_CHECKING:
    from logistic_core.types import Number, NumericArray

# Above this point exp(x) - 1 == exp(x) to double precision.
_LOGEXPM1_SWITCH = 18.0


def logistic(x: Number | NumericArray) -> NumericArray:
    """Standard logistic (sigmoid) function; saturates to 0 or 1 without warnings."""
    with np.errstate(over="ignore"):
        return cast("NumericArray", expit(x))


def logit(p: Number | NumericArray) -> NumericArray:
    """
    Log-odds, the inverse of :func:`logistic`.

    ``logit(0) = -inf`` and ``logit(1) = inf``; values outside ``[0, 1]``
    give NaN.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return cast("NumericArray", _logit(p))


def log1pexp(x: Number | NumericArray) -> NumericArray:
    """
    Compute ``log(1 + exp(x))`` without overflow for large ``x``.

    Computed as ``logaddexp(0, x)``, which returns ``x`` for large positive
    arguments and ``exp(x)`` to full relative precision for large negative ones.
    """
    return cast("NumericArray", np.logaddexp(0.0, x))


def logexpm1(x: Number | NumericArray) -> NumericArray:
    """
    Compute ``log(exp(x) - 1)`` for ``x >= 0``.

    Parameters
    ----------
    x : Number or NumericArray
        Non-negative argument(s).

    Returns
    -------
    NumericArray
        ``-inf`` at ``x = 0``, ``inf`` at ``x = inf`` and NaN for negative ``x``.
    """
    arr = np.asarray(x)
    if not np.issubdtype(arr.dtype, np.floating):
        arr = arr.astype(np.float64)
    with np.errstate(over="ignore", divide="ignore", invalid="ignore"):
        small = np.log(np.expm1(arr))
        large = arr + np.log1p(-np.exp(-arr))
    return cast("NumericArray", np.where(arr <= _LOGEXPM1_SWITCH, small, large))


def sinc(y: Number | NumericArray) -> NumericArray:
    """Normalized sinc, ``sin(pi*y) / (pi*y)``, equal to 1 at ``y = 0``."""
    return cast("NumericArray", np.sinc(y))


__all__ = [
    "log1pexp",
    "logexpm1",
    "logistic",
    "logit",
    "sinc",
]

"""
Shared names and numeric aliases of logistic-core.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

import numpy as np
from numpy.typing import NDArray

Number = np.floating[Any] | np.integer[Any] | int | float
NumericArray = NDArray[np.floating[Any] | np.integer[Any]]
ComplexArray = NDArray[np.complexfloating[Any]]
BoolArray = NDArray[np.bool_]
RealDType = np.dtype[np.floating[Any]]

type GenericCharacteristicName = str
type ParametrizationName = str


@dataclass(frozen=True, slots=True)
class DistributionType:
    """Kind (``"continuous"``) and dimension of a distribution."""

    kind: str
    dimension: int


UnivariateContinuous = DistributionType("continuous", 1)


class CharacteristicName(StrEnum):
    """
    Names under which a family publishes its characteristics.

    The vocabulary is the one of ``scipy.stats``: ``sf`` is the survival
    function (complementary CDF) and ``isf`` its inverse.
    """

    PDF = "pdf"
    LOGPDF = "logpdf"
    GRAD_LOGPDF = "gradlogpdf"
    CDF = "cdf"
    LOGCDF = "logcdf"
    SF = "sf"
    LOGSF = "logsf"
    PPF = "ppf"
    ISF = "isf"
    INVLOGCDF = "invlogcdf"
    INVLOGSF = "invlogsf"
    MGF = "mgf"
    CF = "cf"
    MEAN = "mean"
    MEDIAN = "median"
    MODE = "mode"
    STD = "std"
    VAR = "var"
    SKEW = "skewness"
    KURT = "kurtosis"
    ENTROPY = "entropy"


class FamilyName(StrEnum):
    LOGISTIC = "Logistic"


__all__ = [
    "BoolArray",
    "CharacteristicName",
    "ComplexArray",
    "DistributionType",
    "FamilyName",
    "GenericCharacteristicName",
    "Number",
    "NumericArray",
    "ParametrizationName",
    "RealDType",
    "UnivariateContinuous",
]

"""
Distributions subpackage

The :class:`Distribution` protocol and what it is made of: closed-form
computations, supports, samples and the computation/sampling strategies.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .computation import AnalyticalComputation
from .distribution import Distribution
from .sampling import ArraySample
from .strategies import (
    AnalyticalComputationStrategy,
    ComputationStrategy,
    InverseTransformSamplingStrategy,
    SamplingStrategy,
)
from .support import ContinuousSupport

__all__ = [
    "AnalyticalComputation",
    "AnalyticalComputationStrategy",
    "ArraySample",
    "ComputationStrategy",
    "ContinuousSupport",
    "Distribution",
    "InverseTransformSamplingStrategy",
    "SamplingStrategy",
]

"""
Computation and Sampling Strategies
===================================

A distribution delegates two decisions to pluggable strategy objects:

- :class:`ComputationStrategy` picks the callable that evaluates a
  characteristic; :class:`AnalyticalComputationStrategy` only ever picks the
  closed form the distribution publishes.
- :class:`SamplingStrategy` produces draws;
  :class:`InverseTransformSamplingStrategy` feeds uniform variates to ``ppf``.

Sampling never consults a process-wide random state. Every call receives
``rng``: a :class:`numpy.random.Generator` or a seed for
:func:`numpy.random.default_rng`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING, Any, Protocol

import numpy as np

from logistic_core.distributions.sampling import ArraySample
from logistic_core.types import CharacteristicName

if TYPE_CHECKING:
    from numpy.typing import DTypeLike, NDArray

    from logistic_core.distributions.computation import AnalyticalComputation
    from logistic_core.distributions.distribution import Distribution
    from logistic_core.types import GenericCharacteristicName

logger = logging.getLogger(__name__)


class ComputationStrategy(Protocol):
    def query_method(
        self, state: GenericCharacteristicName, distr: Distribution, **options: Any
    ) -> AnalyticalComputation[Any, Any]: ...


class SamplingStrategy(Protocol):
    def sample(self, n: int, distr: Distribution, **options: Any) -> ArraySample: ...


class AnalyticalComputationStrategy:
    """Resolve characteristics to the distribution's closed forms only."""

    def query_method(
        self, state: GenericCharacteristicName, distr: Distribution, **options: Any
    ) -> AnalyticalComputation[Any, Any]:
        """
        Raises
        ------
        RuntimeError
            If ``distr`` has no closed form for ``state``.
        """
        try:
            return distr.analytical_computations[state]
        except KeyError:
            logger.debug(
                "Characteristic %r is not among %s", state, list(distr.analytical_computations)
            )
            raise RuntimeError(f"No analytical computation for '{state}'") from None


def resolve_rng(rng: Any) -> np.random.Generator:
    """
    Turn the caller's ``rng`` into a generator.

    A :class:`numpy.random.Generator` is returned unchanged; anything else is
    handed to :func:`numpy.random.default_rng` as a seed.

    Raises
    ------
    TypeError
        If ``rng`` is ``None``: there is no implicit random source.
    """
    if rng is None:
        raise TypeError("Sampling requires an explicit random source: pass rng=...")
    return np.random.default_rng(rng)


def uniform_variates(
    rng: np.random.Generator, n: int, dtype: DTypeLike = np.float64
) -> NDArray[Any]:
    """
    ``n`` uniforms of a floating ``dtype`` in the open interval ``(0, 1)``.

    Both ends are excluded so that ``ppf`` of a draw is always finite.
    """
    target = np.dtype(dtype)
    native = target if target.type in (np.float32, np.float64) else np.dtype(np.float64)
    draws = rng.random(n, dtype=native).astype(target, copy=False)
    info = np.finfo(target)
    return np.clip(draws, info.smallest_subnormal, 1 - info.epsneg)


class InverseTransformSamplingStrategy:
    """
    Univariate sampler: ``ppf(U)`` for ``U`` uniform on ``(0, 1)``.

    Uniforms are drawn in the ``dtype`` option (``float64`` by default) and
    the draws keep the dtype ``ppf`` returns, so a ``float32`` distribution
    sampled with ``dtype=float32`` yields ``float32`` values.
    """

    def sample(self, n: int, distr: Distribution, **options: Any) -> ArraySample:
        """
        Raises
        ------
        ValueError
            If ``n`` is negative.
        TypeError
            If no ``rng`` option is given.
        """
        if n < 0:
            raise ValueError(f"Sample size must be non-negative, got {n}")
        generator = resolve_rng(options.pop("rng", None))
        dtype = options.pop("dtype", np.float64)
        ppf = distr.query_method(CharacteristicName.PPF, **options)
        draws = np.asarray(ppf(uniform_variates(generator, n, dtype)))
        return ArraySample(draws.reshape(n, 1))

"""
Sample container returned by sampling strategies.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any

    import numpy as np
    import numpy.typing as npt


class ArraySample:
    """
    Draws stored row-wise in a 2D array of shape ``(n, dimension)``.

    Raises
    ------
    ValueError
        If ``data`` is not two-dimensional.
    """

    __slots__ = ("data",)

    def __init__(self, data: npt.NDArray[np.floating[Any]]) -> None:
        if data.ndim != 2:
            raise ValueError(f"Expected an (n, dimension) array, got {data.ndim} dimension(s)")
        self.data = data

    @property
    def array(self) -> npt.NDArray[np.floating[Any]]:
        return self.data

    @property
    def shape(self) -> tuple[int, int]:
        n, dimension = self.data.shape
        return int(n), int(dimension)

    @property
    def dimension(self) -> int:
        return self.shape[1]

    def ravel(self) -> npt.NDArray[np.floating[Any]]:
        """Flat view of a univariate sample."""
        return self.data.ravel()

    def __len__(self) -> int:
        return self.shape[0]

    def __iter__(self) -> Iterator[npt.NDArray[np.floating[Any]]]:
        return iter(self.data)

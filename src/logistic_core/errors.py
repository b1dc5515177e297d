"""
Errors raised by distribution families.

Both errors subclass :class:`ValueError`, so callers that only care about
"bad input" can keep catching ``ValueError``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Any


class InvalidParameterError(ValueError):
    """
    Distribution parameters violate a constraint of their parametrization.

    Parameters
    ----------
    parameter : str
        Name of the offending parameter.
    value : Any
        Value that was supplied.
    constraint : str
        Human-readable description of the violated constraint.
    """

    def __init__(self, parameter: str, value: Any, constraint: str) -> None:
        self.parameter = parameter
        self.value = value
        self.constraint = constraint
        super().__init__(f'Constraint "{constraint}" does not hold for {parameter}={value!r}')


class InvalidArgumentError(ValueError):
    """
    An argument of a characteristic lies outside its domain.

    Parameters
    ----------
    argument : str
        Name of the offending argument (e.g. ``"p"``).
    domain : str
        Description of the valid domain (e.g. ``"[0, 1]"``).
    """

    def __init__(self, argument: str, domain: str) -> None:
        self.argument = argument
        self.domain = domain
        super().__init__(f"{argument} must be in {domain}")


__all__ = [
    "InvalidArgumentError",
    "InvalidParameterError",
]

"""Errors raised for unit and frequency names outside the known sets."""

from collections.abc import Iterable
from typing import Any


def _valid(names: Iterable[str]) -> str:
    return ", ".join(names)


class UnknownUnitError(ValueError):
    """A duration unit is not one of the known units."""

    def __init__(self, unit: Any, valid: Iterable[str]):
        self.unit: Any = unit
        super().__init__(
            f"Unknown duration unit: {unit!r}\n"
            f"Valid units: {_valid(valid)}\n"
        )


class UnknownFrequencyError(ValueError):
    """A frequency period is not one of the known periods."""

    def __init__(self, frequency: Any, valid: Iterable[str]):
        self.frequency: Any = frequency
        super().__init__(
            f"Unknown frequency: {frequency!r}\n"
            f"Valid frequencies: {_valid(valid)}\n"
        )

"""Exceptions raised by the I-Ching model and its reference data."""

from __future__ import annotations


class IChingError(Exception):
    """Base class for every error raised by this package."""


class IntegerOutOfRange(IChingError, ValueError):
    """An integer was outside the range a conversion accepts."""

    def __init__(self, value: int, low: int, high: int, what: str):
        self.value = value
        self.low = low
        self.high = high
        self.what = what
        super().__init__(
            f"Invalid conversion from {value} to {what}, "
            f"make sure your number is between {low}-{high} inclusive"
        )

    @classmethod
    def check(cls, value: int, low: int, high: int, what: str) -> int:
        """Return value if it is an int (not a bool) within low..high."""
        if isinstance(value, bool) or not isinstance(value, int) or not low <= value <= high:
            raise cls(value, low, high, what)
        return value


class RepositoryError(IChingError):
    """The hexagram reference data could not be loaded or is inconsistent."""

"""
One-dimensional ranges used as the per-axis bounds of a region.
"""

import numbers
from dataclasses import dataclass
from typing import Union

from .errors import InvalidIntervalError

Number = Union[int, float]


@dataclass(frozen=True)
class Interval:
    """Closed range ``[start, end]`` on a single axis."""

    start: Number
    end: Number

    def __post_init__(self) -> None:
        for name in ("start", "end"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise InvalidIntervalError(f"{name} must be a real number, got {value!r}")
        if not self.start <= self.end:
            raise InvalidIntervalError(
                f"start ({self.start}) cannot be greater than end ({self.end})"
            )

    @property
    def length(self) -> Number:
        return self.end - self.start

    def contains(self, value: Number) -> bool:
        return self.start <= value <= self.end

    def intersects(self, other: "Interval", exclusive: bool = False) -> bool:
        """
        Check if this interval overlaps another.

        Intervals are closed by default, so ranges that only touch at a
        boundary overlap. With ``exclusive`` set both ranges are treated as
        half-open partitions of the axis: touching boundaries no longer
        count, while any shared interior (containment included) still does.
        A zero-length interval is an empty partition and intersects nothing.
        """
        if not isinstance(other, Interval):
            raise InvalidIntervalError(f"expected an Interval, got {other!r}")

        if exclusive:
            if self.start == self.end or other.start == other.end:
                return False
            return self.start < other.end and other.start < self.end
        return self.start <= other.end and other.start <= self.end

    def __str__(self) -> str:
        return f"[{self.start}, {self.end}]"

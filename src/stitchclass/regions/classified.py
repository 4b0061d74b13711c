"""
N-dimensional regions carrying integer class labels.

A region is an ordered, fixed-length sequence of Interval slots (one per
axis) plus a set of labels. The stitching pipeline builds one region per
tile and merges the labels of tiles whose regions intersect.
"""

import numbers
from typing import Iterable, Iterator, List, Optional, Set, Union

import numpy as np

from .errors import (
    AxisOutOfRangeError,
    InvalidIntervalError,
    InvalidLabelError,
    InvalidRegionError,
)
from .interval import Interval
from ..logging import get_logger

logger = get_logger(__name__)

_LABEL_MIN = int(np.iinfo(np.int64).min)
_LABEL_MAX = int(np.iinfo(np.int64).max)


def _scalar(value):
    """Unwrap numpy scalars; plain objects from object arrays pass through."""
    return value.item() if isinstance(value, np.generic) else value


class ClassifiedRegion:
    """
    Region of N-dimensional space with one or more class labels applied.

    The constructor accepts three shapes of input:

        ClassifiedRegion(3)                    # 3 unset axes
        ClassifiedRegion([iv_x, iv_y])         # populated from intervals
        ClassifiedRegion(other)                # shallow copy of another region

    A shallow copy shares the interval slots of ``other``: a later
    ``other.set(...)`` is visible through the copy. Labels are never shared
    and are not copied.

    Examples:
        >>> a = ClassifiedRegion.of(Interval(0, 10), Interval(0, 10))
        >>> b = ClassifiedRegion.of(Interval(5, 15), Interval(20, 30))
        >>> a.intersects(b)
        False
    """

    __slots__ = ("_intervals", "_classes")

    def __init__(self, source: Union[int, "ClassifiedRegion", Iterable[Interval]]):
        self._classes: Set[int] = set()

        if isinstance(source, ClassifiedRegion):
            self._intervals = source._intervals
        elif isinstance(source, numbers.Integral) and not isinstance(source, bool):
            if source < 0:
                raise InvalidRegionError(f"dimensionality cannot be negative, got {source}")
            self._intervals: List[Optional[Interval]] = [None] * int(source)
        else:
            try:
                intervals = list(source)
            except TypeError:
                raise InvalidRegionError(
                    f"cannot build a region from {type(source).__name__}"
                ) from None
            for axis, interval in enumerate(intervals):
                if not isinstance(interval, Interval):
                    raise InvalidIntervalError(
                        f"axis {axis}: expected an Interval, got {interval!r}"
                    )
            self._intervals = intervals

    @classmethod
    def empty(cls, size: int) -> "ClassifiedRegion":
        """Region of ``size`` axes, every slot unset."""
        return cls(size)

    @classmethod
    def of(cls, *intervals: Interval) -> "ClassifiedRegion":
        return cls(intervals)

    @classmethod
    def shallow_copy(cls, region: "ClassifiedRegion") -> "ClassifiedRegion":
        """Copy sharing ``region``'s interval slots, with an empty label set."""
        if not isinstance(region, ClassifiedRegion):
            raise InvalidRegionError(f"expected a ClassifiedRegion, got {region!r}")
        return cls(region)

    @classmethod
    def from_bounds(cls, bounds) -> "ClassifiedRegion":
        """Build a region from an ``(N, 2)`` array of ``[start, end]`` rows."""
        array = np.asarray(bounds)
        if array.ndim != 2 or array.shape[1] != 2:
            raise InvalidRegionError(f"bounds must have shape (N, 2), got {array.shape}")
        return cls(Interval(_scalar(row[0]), _scalar(row[1])) for row in array)

    # Labels

    def add_class(self, label: int) -> None:
        """Add a class, in the form of an int value, to this region."""
        if isinstance(label, bool) or not isinstance(label, numbers.Integral):
            raise InvalidLabelError(f"class labels must be integers, got {label!r}")
        if not _LABEL_MIN <= label <= _LABEL_MAX:
            raise InvalidLabelError(f"class label {label} does not fit in a 64-bit integer")
        self._classes.add(int(label))

    def add_all_classes(self, region: "ClassifiedRegion") -> None:
        """Merge the classes attached to another region into this one."""
        if not isinstance(region, ClassifiedRegion):
            raise InvalidRegionError(f"expected a ClassifiedRegion, got {region!r}")
        self._classes.update(region._classes)

    @property
    def classes(self) -> frozenset:
        return frozenset(self._classes)

    def class_array(self) -> np.ndarray:
        """Snapshot of all classes as an ascending int64 array."""
        return np.array(sorted(self._classes), dtype=np.int64)

    # Axes

    def _check_axis(self, axis: int) -> int:
        if (
            isinstance(axis, bool)
            or not isinstance(axis, numbers.Integral)
            or not 0 <= axis < len(self._intervals)
        ):
            raise AxisOutOfRangeError(axis, len(self._intervals))
        return int(axis)

    def set(self, interval: Interval, axis: int) -> None:
        """Set the interval of this region for the given axis."""
        axis = self._check_axis(axis)
        if not isinstance(interval, Interval):
            raise InvalidIntervalError(f"expected an Interval, got {interval!r}")
        self._intervals[axis] = interval

    def get(self, axis: int) -> Optional[Interval]:
        """Interval of this region for the given axis, ``None`` if unset."""
        return self._intervals[self._check_axis(axis)]

    def size(self) -> int:
        """Dimensionality of this region."""
        return len(self._intervals)

    def bounds(self) -> np.ndarray:
        """``(N, 2)`` array of ``[start, end]`` rows, one per axis."""
        rows = []
        for axis in range(self.size()):
            interval = self._require(axis)
            rows.append((interval.start, interval.end))
        if not rows:
            return np.empty((0, 2))
        return np.array(rows)

    def _require(self, axis: int) -> Interval:
        interval = self._intervals[axis]
        if interval is None:
            raise InvalidIntervalError(f"axis {axis} has no interval set")
        return interval

    # Queries

    def intersects(self, other: "ClassifiedRegion", ignore_overlap: bool = False) -> bool:
        """
        Return True if this region intersects the other region.

        Only the leading axes shared by both regions are compared, so a
        region of dimensionality 0 intersects everything. If
        ``ignore_overlap`` is set, both regions are treated as sets of
        exclusive intervals.
        """
        if not isinstance(other, ClassifiedRegion):
            raise InvalidRegionError(f"expected a ClassifiedRegion, got {other!r}")

        for axis in range(min(self.size(), other.size())):
            if not self._require(axis).intersects(other._require(axis), ignore_overlap):
                logger.debug(f"Regions disjoint on axis {axis}")
                return False
        return True

    # Python protocols

    def __len__(self) -> int:
        return self.size()

    def __getitem__(self, axis: int) -> Optional[Interval]:
        return self.get(axis)

    def __setitem__(self, axis: int, interval: Interval) -> None:
        self.set(interval, axis)

    def __iter__(self) -> Iterator[Optional[Interval]]:
        return iter(list(self._intervals))

    def __str__(self) -> str:
        return "".join(f"{interval}; " for interval in self._intervals)

    def __repr__(self) -> str:
        intervals = ", ".join(str(interval) for interval in self._intervals)
        return f"ClassifiedRegion([{intervals}], classes={sorted(self._classes)})"

"""Exceptions raised by the region model."""


class RegionError(Exception):
    """Base class for region precondition violations."""


class AxisOutOfRangeError(RegionError, IndexError):
    """Axis index outside ``[0, size())``."""

    def __init__(self, axis: int, size: int):
        super().__init__(f"axis {axis} out of range for region of size {size}")
        self.axis = axis
        self.size = size


class InvalidIntervalError(RegionError, ValueError):
    pass


class InvalidLabelError(RegionError, TypeError):
    pass


class InvalidRegionError(RegionError, ValueError):
    pass

"""
Labelled N-dimensional regions for tile classification.

This module provides the interval and region model used to decide which
tiles of a stitching layout overlap, and to merge the class labels of
overlapping tiles.
"""

from .errors import (
    RegionError,
    AxisOutOfRangeError,
    InvalidIntervalError,
    InvalidLabelError,
    InvalidRegionError,
)
from .interval import Interval
from .classified import ClassifiedRegion
from .merge import RegionGroup, find_overlaps, group_overlapping, merge_overlapping_classes
from .tiles import region_for_tile

__all__ = [
    'RegionError',
    'AxisOutOfRangeError',
    'InvalidIntervalError',
    'InvalidLabelError',
    'InvalidRegionError',
    'Interval',
    'ClassifiedRegion',
    'RegionGroup',
    'find_overlaps',
    'group_overlapping',
    'merge_overlapping_classes',
    'region_for_tile',
]

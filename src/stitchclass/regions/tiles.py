"""Regions covering image tiles placed in a larger volume."""

from typing import Optional, Sequence

import numpy as np

from .classified import ClassifiedRegion
from .errors import InvalidRegionError
from .interval import Interval


def region_for_tile(
    shape: Sequence[int],
    offset: Optional[Sequence[float]] = None,
    label: Optional[int] = None
) -> ClassifiedRegion:
    """
    Build the region covered by a tile.

    Args:
        shape: Tile extent per axis, e.g. ``image.shape``
        offset: Tile origin per axis (zeros if None)
        label: Optional class label to attach

    Returns:
        Region spanning ``[offset[i], offset[i] + shape[i]]`` on every axis
    """
    extent = np.asarray(shape, dtype=float)
    origin = np.zeros_like(extent) if offset is None else np.asarray(offset, dtype=float)

    if extent.ndim != 1 or origin.shape != extent.shape:
        raise InvalidRegionError(
            f"offset {tuple(origin.shape)} does not match tile shape {tuple(extent.shape)}"
        )
    if np.any(extent < 0):
        raise InvalidRegionError(f"tile shape cannot be negative, got {tuple(shape)}")

    region = ClassifiedRegion(
        Interval(float(start), float(start + size)) for start, size in zip(origin, extent)
    )
    if label is not None:
        region.add_class(label)
    return region

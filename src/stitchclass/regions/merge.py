"""Grouping of overlapping regions and label propagation between them."""

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple
from collections import defaultdict

from .classified import ClassifiedRegion
from ..logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class RegionGroup:
    """Connected set of overlapping regions and the union of their labels."""
    group_id: str
    indices: Tuple[int, ...]
    classes: Tuple[int, ...]


def find_overlaps(
    regions: Sequence[ClassifiedRegion],
    ignore_overlap: bool = False
) -> List[Tuple[int, int]]:
    """
    Find every pair of intersecting regions.

    Returns:
        Index pairs ``(i, j)`` with ``i < j``, in lexicographic order
    """
    pairs = []
    for i in range(len(regions)):
        for j in range(i + 1, len(regions)):
            if regions[i].intersects(regions[j], ignore_overlap):
                pairs.append((i, j))
    return pairs


def group_overlapping(
    regions: Sequence[ClassifiedRegion],
    ignore_overlap: bool = False
) -> List[RegionGroup]:
    """
    Group regions into connected components of the overlap graph.

    Two regions land in the same group when a chain of pairwise
    intersections links them (single-link clustering). Regions that
    intersect nothing form singleton groups.

    Args:
        regions: Regions to group
        ignore_overlap: Treat intervals as exclusive partitions

    Returns:
        Groups ordered by their lowest member index
    """
    if not regions:
        return []

    n = len(regions)
    parent = list(range(n))

    def find(x: int) -> int:
        if parent[x] != x:
            parent[x] = find(parent[x])
        return parent[x]

    def union(x: int, y: int) -> None:
        px, py = find(x), find(y)
        if px != py:
            parent[max(px, py)] = min(px, py)

    for i, j in find_overlaps(regions, ignore_overlap):
        union(i, j)
        logger.debug(f"Grouped regions {i} and {j}")

    clusters: Dict[int, List[int]] = defaultdict(list)
    for i in range(n):
        clusters[find(i)].append(i)

    groups = []
    for counter, members in enumerate(sorted(clusters.values(), key=min), start=1):
        labels = set()
        for index in members:
            labels.update(regions[index].classes)
        groups.append(RegionGroup(
            group_id=f"grp_{counter:03d}",
            indices=tuple(members),
            classes=tuple(sorted(labels)),
        ))

    logger.info(f"Grouped {n} regions into {len(groups)} groups")
    return groups


def merge_overlapping_classes(
    regions: Sequence[ClassifiedRegion],
    ignore_overlap: bool = False
) -> List[RegionGroup]:
    """
    Give every region the labels of all regions in its overlap group.

    Regions are updated in place with the union recorded on their group.
    """
    groups = group_overlapping(regions, ignore_overlap)
    for group in groups:
        if len(group.indices) < 2:
            continue
        for index in group.indices:
            for label in group.classes:
                regions[index].add_class(label)
    return groups

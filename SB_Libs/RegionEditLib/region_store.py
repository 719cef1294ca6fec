"""
Region store for Selective Blur.

The region list is the single source of truth for which blur edits exist.
Every operation is a pure transformation of an immutable tuple; the
RegionStore class only keeps a reference to the current tuple.

Functions:
    commit_region: Append a region to a region list
    set_all_blur_strength: Replace every region's blur strength
    clear_regions: Return an empty region list

Classes:
    RegionStore: Holder of the session's current region list
"""

from typing import Iterable, Iterator
import logging

from SB_Libs.RegionEditLib.region_models import Region, RegionList, validate_blur_strength

logger = logging.getLogger(__name__)


def commit_region(regions: RegionList, region: Region) -> RegionList:
    """
    Append a region to the end of a region list.

    Args:
        regions: Current region list
        region: Region to paint after all existing ones

    Returns:
        A new region list
    """
    if not isinstance(region, Region):
        raise TypeError(f"Expected Region, got {type(region)}")
    return tuple(regions) + (region,)


def set_all_blur_strength(regions: RegionList, value: int) -> RegionList:
    """
    Replace the blur strength of every region. Geometry is unchanged.

    Args:
        regions: Current region list
        value: New blur strength (1-20)

    Returns:
        A new region list
    """
    value = validate_blur_strength(value)
    return tuple(region.with_blur_strength(value) for region in regions)


def clear_regions() -> RegionList:
    return ()


class RegionStore:
    """Owns the ordered list of committed blur regions."""

    def __init__(self, regions: Iterable[Region] = ()):
        self._regions: RegionList = tuple(regions)

    @property
    def regions(self) -> RegionList:
        return self._regions

    def __len__(self) -> int:
        return len(self._regions)

    def __iter__(self) -> Iterator[Region]:
        return iter(self._regions)

    def commit(self, region: Region) -> RegionList:
        self._regions = commit_region(self._regions, region)
        logger.debug("Committed region %s (%d total)", region, len(self._regions))
        return self._regions

    def set_all_blur_strength(self, value: int) -> RegionList:
        self._regions = set_all_blur_strength(self._regions, value)
        return self._regions

    def clear(self) -> RegionList:
        self._regions = clear_regions()
        return self._regions

    def replace(self, snapshot: RegionList) -> RegionList:
        """Swap in a snapshot taken from the history log."""
        self._regions = tuple(snapshot)
        return self._regions

"""
Ranking helpers for scored prospects: ICP range bands, sorting, filtering.
"""

from typing import Any, List, Mapping, Optional, Tuple, Union

from .models.schemas import ICPScoreBreakdown, IcpRange, Segment, SortOption
from .config import settings

ScoredProspect = Tuple[Mapping[str, Any], ICPScoreBreakdown]


def icp_range(total: int) -> IcpRange:
    """Band a total score: high >= 70, medium 40-69, low < 40"""
    for threshold, band in settings.ICP_RANGES:
        if total >= threshold:
            return IcpRange(band)
    return IcpRange.LOW


def _field(record: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = record.get(key)
        if value is not None and value != "":
            return value
    return None


def _name_key(item: ScoredProspect) -> str:
    name = _field(item[0], "full_name", "fullName", "name")
    return str(name).lower() if name is not None else ""


def _created_key(item: ScoredProspect) -> str:
    created = _field(item[0], "created_at", "createdAt")
    return str(created) if created is not None else ""


def sort_scored(
    items: List[ScoredProspect],
    sort_by: Union[SortOption, str, None] = SortOption.ICP_DESC,
) -> List[ScoredProspect]:
    """
    Order (prospect, breakdown) pairs.

    Sorting is stable, so ties keep their input order. Unknown options
    leave the list as given.

    Args:
        items: Scored prospects
        sort_by: icp_desc, icp_asc, name_asc or recent (newest first)

    Returns:
        New sorted list
    """
    try:
        option = SortOption(sort_by)
    except ValueError:
        return list(items)

    if option == SortOption.ICP_DESC:
        return sorted(items, key=lambda item: item[1].total, reverse=True)
    if option == SortOption.ICP_ASC:
        return sorted(items, key=lambda item: item[1].total)
    if option == SortOption.NAME_ASC:
        return sorted(items, key=_name_key)
    return sorted(items, key=_created_key, reverse=True)


def filter_scored(
    items: List[ScoredProspect],
    segment: Optional[Union[Segment, str]] = None,
    band: Optional[Union[IcpRange, str]] = None,
) -> List[ScoredProspect]:
    """Keep pairs matching a segment and/or ICP range; None means any"""
    wanted_segment = Segment(segment) if segment else None
    wanted_band = IcpRange(band) if band else None
    return [
        item
        for item in items
        if (wanted_segment is None or item[1].segment == wanted_segment)
        and (wanted_band is None or icp_range(item[1].total) == wanted_band)
    ]

"""Tests for ICP range bands, sorting and filtering."""

from __future__ import annotations

import pytest

from prospect_icp.models.schemas import ICPScoreBreakdown, IcpRange, Segment, SortOption
from prospect_icp.ranking import filter_scored, icp_range, sort_scored


def _breakdown(total: int, segment: Segment = Segment.MERCHANT) -> ICPScoreBreakdown:
    return ICPScoreBreakdown(
        segment=segment,
        title_authority=0,
        company_signals=0,
        company_size=0,
        product_category=0,
        profile_completeness=0,
        total=total,
    )


def _scored() -> list:
    return [
        ({"full_name": "Alice", "created_at": "2024-01-01"}, _breakdown(50)),
        ({"fullName": "bob", "createdAt": "2024-01-03"}, _breakdown(80, Segment.AGENCY)),
        ({"full_name": "Charlie", "created_at": "2024-01-02"}, _breakdown(30)),
    ]


def _names(items: list) -> list:
    return [prospect.get("full_name") or prospect.get("fullName") for prospect, _ in items]


@pytest.mark.parametrize(
    ("total", "expected"),
    [
        (100, IcpRange.HIGH),
        (85, IcpRange.HIGH),
        (70, IcpRange.HIGH),
        (69, IcpRange.MEDIUM),
        (50, IcpRange.MEDIUM),
        (40, IcpRange.MEDIUM),
        (39, IcpRange.LOW),
        (20, IcpRange.LOW),
        (0, IcpRange.LOW),
    ],
)
def test_icp_range_bands(total: int, expected: IcpRange) -> None:
    assert icp_range(total) == expected


@pytest.mark.parametrize(
    ("sort_by", "expected"),
    [
        (SortOption.ICP_DESC, ["bob", "Alice", "Charlie"]),
        ("icp_asc", ["Charlie", "Alice", "bob"]),
        ("name_asc", ["Alice", "bob", "Charlie"]),
        ("recent", ["bob", "Charlie", "Alice"]),
    ],
)
def test_sort_options(sort_by: str, expected: list) -> None:
    assert _names(sort_scored(_scored(), sort_by)) == expected


def test_unknown_sort_keeps_input_order() -> None:
    assert _names(sort_scored(_scored(), "shoe_size")) == ["Alice", "bob", "Charlie"]


def test_sort_is_stable_for_ties() -> None:
    items = [
        ({"full_name": "First"}, _breakdown(60)),
        ({"full_name": "Second"}, _breakdown(60)),
    ]
    assert _names(sort_scored(items, SortOption.ICP_DESC)) == ["First", "Second"]


def test_filter_by_segment_and_range() -> None:
    items = _scored()

    assert _names(filter_scored(items, segment=Segment.AGENCY)) == ["bob"]
    assert _names(filter_scored(items, band="medium")) == ["Alice"]
    assert _names(filter_scored(items, segment="merchant", band=IcpRange.LOW)) == ["Charlie"]
    assert filter_scored(items) == items

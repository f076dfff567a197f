"""
区間モジュールのテスト
"""

from dataclasses import FrozenInstanceError

import pytest

from src.plate.region import Region, by_apex


def test_span_apex_defaults_to_right():
    """区間形式では apex が right と一致する"""
    region = Region.span(2, 7)

    assert region.apex == 7
    assert region == Region(2, 7)
    assert region.width == 5


def test_peak_form_keeps_apex():
    region = Region.peak(1, 3, 6)

    assert (region.left, region.apex, region.right) == (1, 3, 6)
    assert region.width == 5
    assert region != Region.span(1, 6)


def test_region_is_immutable():
    region = Region.span(0, 3)

    with pytest.raises(FrozenInstanceError):
        region.left = 1


def test_sort_by_apex_left_to_right():
    """頂点の位置で左から右へ整列される"""
    regions = [Region.peak(6, 7, 8), Region.peak(0, 1, 2), Region.peak(3, 4, 5)]

    ordered = sorted(regions, key=by_apex)

    assert [r.apex for r in ordered] == [1, 4, 7]

"""Tests for numeric range resolution."""

import pytest

from tomescan.core.constants import DEFAULT_CHAPTER, SPECIAL_VOLUME
from tomescan.core.extractors import parse_volume
from tomescan.core.ranges import (
    add_chapter_part,
    format_value,
    max_from_range,
    min_from_range,
    parse_number,
    remove_leading_zeroes,
)
from tomescan.models.schemas import LibraryType


@pytest.mark.parametrize(
    ("text", "low", "high"),
    [
        ("12-14", 12.0, 14.0),
        ("14-12", 12.0, 14.0),
        ("2.5", 2.5, 2.5),
        ("1", 1.0, 1.0),
        ("abc", 0.0, 0.0),
        ("", 0.0, 0.0),
    ],
)
def test_range_bounds(text: str, low: float, high: float) -> None:
    assert min_from_range(text) == low
    assert max_from_range(text) == high


def test_sentinels_are_not_split_on_their_sign() -> None:
    assert min_from_range(DEFAULT_CHAPTER) == -100000.0
    assert max_from_range(DEFAULT_CHAPTER) == -100000.0
    assert min_from_range(SPECIAL_VOLUME) == 100000.0


def test_parse_number() -> None:
    assert parse_number("-3.5") == -3.5
    assert parse_number(" 7 ") == 7.0
    assert parse_number("3a") is None
    assert parse_number("") is None


def test_remove_leading_zeroes() -> None:
    assert remove_leading_zeroes("01-03") == "1-3"
    assert remove_leading_zeroes("000") == "0"
    assert remove_leading_zeroes("10") == "10"
    assert remove_leading_zeroes("") == ""


def test_add_chapter_part() -> None:
    assert add_chapter_part("12") == "12.5"
    assert add_chapter_part("12.5") == "12.5"


def test_format_value() -> None:
    assert format_value("012") == "12"
    assert format_value("012", has_part=True) == "12.5"
    # Ranges never become part releases
    assert format_value("01-03", has_part=True) == "1-3"


def test_format_value_orders_reversed_range() -> None:
    assert format_value("3-1") == "1-3"
    assert format_value("014-012") == "12-14"
    assert format_value("1-3") == "1-3"


def test_reversed_volume_range_in_filename() -> None:
    assert parse_volume("Series v3-1", LibraryType.MANGA) == "1-3"

"""Tests for ReadingPosition value object."""

import pytest

from heidelberg.domain.common.exceptions import InvariantViolationError
from heidelberg.domain.common.value_objects import ReadingPosition, parse_page_number


class TestReadingPosition:
    """Test suite for ReadingPosition value object."""

    def test_create_with_defaults(self) -> None:
        pos = ReadingPosition(page=7)
        assert pos.page == 7
        assert pos.max_page == 52

    def test_is_frozen(self) -> None:
        pos = ReadingPosition(page=1)
        with pytest.raises(AttributeError):
            pos.page = 2  # type: ignore[misc]

    @pytest.mark.parametrize("page", [0, -3, 53])
    def test_rejects_out_of_range(self, page: int) -> None:
        with pytest.raises(InvariantViolationError):
            ReadingPosition(page=page)

    def test_rejects_empty_range(self) -> None:
        with pytest.raises(InvariantViolationError):
            ReadingPosition(page=1, max_page=0)

    def test_ordering_by_page(self) -> None:
        assert ReadingPosition(page=3) < ReadingPosition(page=30)

    def test_every_page_in_range_is_accepted(self) -> None:
        for page in range(1, 53):
            assert ReadingPosition.parse(str(page)).page == page

    @pytest.mark.parametrize(
        ("page", "expected"),
        [(0, 1), (-10, 1), (53, 52), (1000, 52), (1, 1), (52, 52)],
    )
    def test_clamp_snaps_to_nearest_bound(self, page: int, expected: int) -> None:
        assert ReadingPosition.clamp(page).page == expected

    @pytest.mark.parametrize("raw", [None, "", "abc", "page_3", "  ", "x12"])
    def test_parse_non_numeric_defaults_to_first_page(self, raw: str | None) -> None:
        assert ReadingPosition.parse(raw).page == 1

    @pytest.mark.parametrize(("raw", "expected"), [("99", 52), ("-4", 1), ("0", 1)])
    def test_parse_out_of_range_clamps(self, raw: str, expected: int) -> None:
        assert ReadingPosition.parse(raw).page == expected

    def test_parse_respects_custom_max_page(self) -> None:
        assert ReadingPosition.parse("40", max_page=31).page == 31

    def test_distance_to(self) -> None:
        pos = ReadingPosition(page=10)
        assert pos.distance_to(11) == 1
        assert pos.distance_to(8) == 2
        assert pos.distance_to(10) == 0

    def test_with_page_keeps_bounds(self) -> None:
        pos = ReadingPosition(page=5, max_page=31)
        moved = pos.with_page(40)
        assert moved.page == 31
        assert moved.max_page == 31

    def test_primitive_forms(self) -> None:
        pos = ReadingPosition(page=12)
        assert pos.to_primitive() == 12
        assert int(pos) == 12
        assert str(pos) == "12"


class TestParsePageNumber:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("12", 12),
            (" 12", 12),
            ("7th", 7),
            ("+3", 3),
            ("-2", -2),
            (15, 15),
            ("abc", None),
            ("", None),
            (None, None),
            (True, None),
        ],
    )
    def test_integer_prefix(self, raw: str | int | None, expected: int | None) -> None:
        assert parse_page_number(raw) == expected

    def test_leading_zeros_are_ignored(self) -> None:
        assert parse_page_number("0" * 5000 + "7") == 7

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("9" * 5000, 52), ("-" + "9" * 5000, 1), ("1" * 10 + "th", 52)],
    )
    def test_oversized_numbers_clamp(self, raw: str, expected: int) -> None:
        assert ReadingPosition.parse(raw).page == expected

    def test_non_ascii_digits_are_not_numbers(self) -> None:
        assert parse_page_number("١٢") is None

"""Tests for the ContentCatalog domain service."""

import pytest

from heidelberg.domain.common.exceptions import InvariantViolationError, ValidationError
from heidelberg.domain.common.value_objects import SectionId
from heidelberg.domain.reading.services.content_catalog import ContentCatalog, ContentGrouping


class TestContentCatalog:
    def test_covers_all_52_pages(self) -> None:
        catalog = ContentCatalog()
        assert catalog.max_page == 52
        for page in range(1, 53):
            assert SectionId(page) in catalog.sections_for(page)

    @pytest.mark.parametrize(
        ("page", "name"),
        [
            (1, "inleiding"),
            (2, "ellende"),
            (4, "ellende"),
            (5, "verlossing"),
            (31, "verlossing"),
            (32, "dankbaarheid"),
            (52, "dankbaarheid"),
        ],
    )
    def test_grouping_boundaries(self, page: int, name: str) -> None:
        assert ContentCatalog().grouping_for(page).name == name

    def test_sections_for_returns_whole_grouping(self) -> None:
        sections = ContentCatalog().sections_for(3)
        assert [str(s) for s in sections] == ["page_2", "page_3", "page_4"]

    @pytest.mark.parametrize("page", [0, 53])
    def test_page_without_content(self, page: int) -> None:
        with pytest.raises(ValidationError):
            ContentCatalog().grouping_for(page)

    def test_rejects_gaps(self) -> None:
        with pytest.raises(InvariantViolationError):
            ContentCatalog((ContentGrouping("a", "A", 1, 2), ContentGrouping("b", "B", 4, 5)))

    def test_rejects_empty_catalog(self) -> None:
        with pytest.raises(InvariantViolationError):
            ContentCatalog(())

    def test_rejects_inverted_range(self) -> None:
        with pytest.raises(InvariantViolationError):
            ContentGrouping("a", "A", 5, 2)

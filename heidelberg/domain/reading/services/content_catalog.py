"""Domain service mapping pages to the content grouping rendered around them."""

from dataclasses import dataclass
from typing import Final

from heidelberg.domain.common.exceptions import InvariantViolationError, ValidationError
from heidelberg.domain.common.value_objects import SectionId


@dataclass(frozen=True)
class ContentGrouping:
    """A named, contiguous page range rendered as one block."""

    name: str
    title: str
    first_page: int
    last_page: int

    def __post_init__(self) -> None:
        if self.first_page < 1 or self.last_page < self.first_page:
            raise InvariantViolationError(
                "ContentGrouping", f"invalid range {self.first_page}..{self.last_page}"
            )

    def contains(self, page: int) -> bool:
        return self.first_page <= page <= self.last_page

    @property
    def sections(self) -> list[SectionId]:
        return [SectionId(page) for page in range(self.first_page, self.last_page + 1)]


# The catechism's 52 Lord's Days, one page each, in its three parts after
# the introductory question.
HEIDELBERG_GROUPINGS: Final[tuple[ContentGrouping, ...]] = (
    ContentGrouping("inleiding", "Inleiding", 1, 1),
    ContentGrouping("ellende", "Van de ellende van de mens", 2, 4),
    ContentGrouping("verlossing", "Van de verlossing van de mens", 5, 31),
    ContentGrouping("dankbaarheid", "Van de dankbaarheid", 32, 52),
)


class ContentCatalog:
    """Resolves which sections are renderable for a given page.

    Groupings must tile 1..max_page without gaps or overlaps.
    """

    def __init__(self, groupings: tuple[ContentGrouping, ...] = HEIDELBERG_GROUPINGS) -> None:
        expected = 1
        for grouping in groupings:
            if grouping.first_page != expected:
                raise InvariantViolationError(
                    "ContentCatalog", f"grouping {grouping.name} must start at page {expected}"
                )
            expected = grouping.last_page + 1
        if not groupings:
            raise InvariantViolationError("ContentCatalog", "at least one grouping is required")
        self._groupings = groupings

    @property
    def max_page(self) -> int:
        return self._groupings[-1].last_page

    @property
    def groupings(self) -> tuple[ContentGrouping, ...]:
        return self._groupings

    def grouping_for(self, page: int) -> ContentGrouping:
        """Grouping containing ``page``. Raises ValidationError when out of range."""
        for grouping in self._groupings:
            if grouping.contains(page):
                return grouping
        raise ValidationError("Page has no content", field="page", value=page)

    def sections_for(self, page: int) -> list[SectionId]:
        """Section identities rendered while ``page`` is the reading position."""
        return self.grouping_for(page).sections

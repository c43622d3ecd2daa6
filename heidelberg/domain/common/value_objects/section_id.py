"""SectionId value object.

Every rendered content section carries a DOM identity of the form
``page_<N>``. The number after the first underscore is the page the section
belongs to.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from ..exceptions import ValidationError

if TYPE_CHECKING:
    from typing import Self

SECTION_PREFIX: Final[str] = "page_"


@dataclass(frozen=True, order=True)
class SectionId:
    """Identity of a content section, ordered by page."""

    page: int

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValidationError("Section page must be positive", field="page", value=self.page)

    @classmethod
    def parse(cls, raw: str) -> Self:
        """Parse ``page_<N>``. Raises ValidationError for anything else."""
        prefix, sep, number = raw.partition("_")
        if (
            not sep
            or f"{prefix}_" != SECTION_PREFIX
            or not (number.isascii() and number.isdigit())
            or len(number) > 9
        ):
            raise ValidationError("Malformed section id", field="section_id", value=raw)
        return cls(int(number))

    def to_primitive(self) -> str:
        return str(self)

    def __str__(self) -> str:
        return f"{SECTION_PREFIX}{self.page}"

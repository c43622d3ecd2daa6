"""ReadingPosition value object.

A ReadingPosition is the authoritative page of a reader session: an integer
in [1, max_page]. Values coming from outside (query strings, slider input,
visibility reports) go through ``parse`` or ``clamp`` before they can
become a position.

Parsing follows integer-prefix semantics: leading whitespace and an
optional sign are accepted and trailing garbage is ignored, so ``"7th"``
reads as 7. Anything without leading digits falls back to the first page.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from ..exceptions import InvariantViolationError

if TYPE_CHECKING:
    from typing import Self

FIRST_PAGE: Final[int] = 1
DEFAULT_MAX_PAGE: Final[int] = 52

_INTEGER_PREFIX = re.compile(r"^\s*([+-]?)(\d+)", re.ASCII)

# Digit runs longer than this saturate instead of being converted.
_MAX_PAGE_DIGITS: Final[int] = 9
_SATURATED_PAGE_NUMBER: Final[int] = 10**_MAX_PAGE_DIGITS


def parse_page_number(raw: str | int | None) -> int | None:
    """Read the integer prefix of ``raw``, or None when there is none.

    Prefixes too long to be a page saturate to a large number of the same
    sign, so clamping still snaps them to the nearest bound.
    """
    if raw is None:
        return None
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    match = _INTEGER_PREFIX.match(raw)
    if match is None:
        return None
    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    if len(digits) > _MAX_PAGE_DIGITS:
        number = _SATURATED_PAGE_NUMBER
    else:
        number = int(digits)
    return -number if sign == "-" else number


@dataclass(frozen=True, order=True)
class ReadingPosition:
    """A page in [1, max_page], ordered by page number."""

    page: int
    max_page: int = DEFAULT_MAX_PAGE

    def __post_init__(self) -> None:
        if self.max_page < FIRST_PAGE:
            raise InvariantViolationError("ReadingPosition", "max_page must be positive")
        if not FIRST_PAGE <= self.page <= self.max_page:
            raise InvariantViolationError(
                "ReadingPosition", f"page {self.page} outside [1, {self.max_page}]"
            )

    @classmethod
    def first(cls, max_page: int = DEFAULT_MAX_PAGE) -> Self:
        """The first page of the book."""
        return cls(page=FIRST_PAGE, max_page=max_page)

    @classmethod
    def clamp(cls, page: int, max_page: int = DEFAULT_MAX_PAGE) -> Self:
        """Pull ``page`` into range, snapping to the nearest bound."""
        return cls(page=min(max(page, FIRST_PAGE), max_page), max_page=max_page)

    @classmethod
    def parse(cls, raw: str | int | None, max_page: int = DEFAULT_MAX_PAGE) -> Self:
        """Parse external input softly.

        Missing or non-numeric input yields the first page, numeric input is
        clamped. Never raises for user-supplied values.
        """
        number = parse_page_number(raw)
        if number is None:
            return cls.first(max_page)
        return cls.clamp(number, max_page)

    def distance_to(self, page: int) -> int:
        """Absolute page distance to ``page``."""
        return abs(page - self.page)

    def with_page(self, page: int) -> Self:
        """Clamped copy at ``page`` with the same bounds."""
        return type(self).clamp(page, self.max_page)

    def to_primitive(self) -> int:
        return self.page

    def __int__(self) -> int:
        return self.page

    def __str__(self) -> str:
        return str(self.page)

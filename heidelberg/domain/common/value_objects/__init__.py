from .ids import ReaderSessionId
from .reading_position import (
    DEFAULT_MAX_PAGE,
    FIRST_PAGE,
    ReadingPosition,
    parse_page_number,
)
from .section_id import SECTION_PREFIX, SectionId

__all__ = [
    "DEFAULT_MAX_PAGE",
    "FIRST_PAGE",
    "SECTION_PREFIX",
    "ReaderSessionId",
    "ReadingPosition",
    "SectionId",
    "parse_page_number",
]

from .content_catalog import HEIDELBERG_GROUPINGS, ContentCatalog, ContentGrouping
from .url_state import DEFAULT_READER_PATH, build_reader_url, is_scroll_act

__all__ = [
    "DEFAULT_READER_PATH",
    "HEIDELBERG_GROUPINGS",
    "ContentCatalog",
    "ContentGrouping",
    "build_reader_url",
    "is_scroll_act",
]

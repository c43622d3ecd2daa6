"""Shareable URL state of the reader.

The URL mirrors the reading position: ``<path>?page=N`` for a position set
by the slider or a link, ``<path>?page=N&act=scroll`` for a position the
reader reached by scrolling.
"""

from typing import Final
from urllib.parse import urlencode

DEFAULT_READER_PATH: Final[str] = "/heidelberg"
PAGE_PARAM: Final[str] = "page"
ACT_PARAM: Final[str] = "act"
SCROLL_ACT: Final[str] = "scroll"


def build_reader_url(path: str, page: int, *, scrolled: bool = False) -> str:
    """URL for ``page``, marked as scroll-originated when ``scrolled``."""
    params: dict[str, str | int] = {PAGE_PARAM: page}
    if scrolled:
        params[ACT_PARAM] = SCROLL_ACT
    return f"{path}?{urlencode(params)}"


def is_scroll_act(act: str | None) -> bool:
    return act == SCROLL_ACT

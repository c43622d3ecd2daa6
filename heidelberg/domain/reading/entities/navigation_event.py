"""Navigation events fed into a progress controller.

Each variant names where a page change came from, which decides whether
the controller asks the client to scroll:

- ``SliderDrag``: the reader moved the progress slider
- ``ScrollConfirm``: the reader scrolled a new section into view
- ``DirectLink``: the URL changed underneath us (back/forward, deep link)
"""

from dataclasses import dataclass
from enum import StrEnum


class NavigationOrigin(StrEnum):
    """Where a page change originated."""

    SLIDER = "slider"
    SCROLL = "scroll"
    LINK = "link"


@dataclass(frozen=True)
class SliderDrag:
    page: int

    origin = NavigationOrigin.SLIDER


@dataclass(frozen=True)
class ScrollConfirm:
    page: int

    origin = NavigationOrigin.SCROLL


@dataclass(frozen=True)
class DirectLink:
    # Raw ``page`` query value; the controller parses it softly.
    page: str | int | None

    origin = NavigationOrigin.LINK


NavigationEvent = SliderDrag | ScrollConfirm | DirectLink

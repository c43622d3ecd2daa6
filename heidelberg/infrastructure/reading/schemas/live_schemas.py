"""Wire contract of the reader's live session.

Every frame is a JSON object ``{"event": <name>, "payload": {...}}``.
Page numbers travel as strings, the way form values and DOM ids do.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field, TypeAdapter

from heidelberg.domain.common.value_objects import parse_page_number
from heidelberg.domain.reading.entities import (
    DirectLink,
    NavigationEvent,
    ScrollConfirm,
    ScrollIntent,
    SliderDrag,
)
from heidelberg.exceptions import MalformedLiveEventError
from heidelberg.infrastructure.reading.schemas.reader_schemas import ReaderViewResponse

PageValue = str | int


def _require_page(raw: PageValue, field: str) -> int:
    page = parse_page_number(raw)
    if page is None:
        raise MalformedLiveEventError(f"{field} is not a page number: {raw!r}")
    return page


# --- Client to server ---


class SlidingPayload(BaseModel):
    reader_progress: PageValue


class SlidingEvent(BaseModel):
    """The progress slider settled after the client-side debounce."""

    event: Literal["sliding"]
    payload: SlidingPayload

    def to_navigation_event(self) -> NavigationEvent:
        return SliderDrag(_require_page(self.payload.reader_progress, "reader_progress"))


class ScrollToPayload(BaseModel):
    position: PageValue


class ScrollToEvent(BaseModel):
    """A section became dominant in the viewport."""

    event: Literal["scrollto"]
    payload: ScrollToPayload

    def to_navigation_event(self) -> NavigationEvent:
        return ScrollConfirm(_require_page(self.payload.position, "position"))


class NavigatePayload(BaseModel):
    page: PageValue | None = None


class NavigateEvent(BaseModel):
    """The browser URL changed (history navigation, deep link)."""

    event: Literal["navigate"]
    payload: NavigatePayload

    def to_navigation_event(self) -> NavigationEvent:
        return DirectLink(self.payload.page)


ClientEvent = Annotated[
    SlidingEvent | ScrollToEvent | NavigateEvent,
    Field(discriminator="event"),
]

client_event_adapter: TypeAdapter[SlidingEvent | ScrollToEvent | NavigateEvent] = TypeAdapter(
    ClientEvent
)


# --- Server to client ---


class PatchPayload(BaseModel):
    to: str = Field(..., description="URL to push into history without reloading")


class PatchMessage(BaseModel):
    event: Literal["patch"] = "patch"
    payload: PatchPayload


class RenderMessage(BaseModel):
    event: Literal["render"] = "render"
    payload: ReaderViewResponse


class ScrollCommandPayload(BaseModel):
    page: str = Field(..., description="DOM id of the target section, e.g. 'page_15'")
    confirm: bool = Field(
        False, description="Confirmation of a scroll the reader already made; do not re-scroll"
    )


class ScrollCommandMessage(BaseModel):
    event: Literal["scrollto"] = "scrollto"
    payload: ScrollCommandPayload

    @classmethod
    def from_intent(cls, intent: ScrollIntent) -> "ScrollCommandMessage":
        return cls(
            payload=ScrollCommandPayload(
                page=str(intent.target), confirm=intent.confirmation_only
            )
        )


class ErrorPayload(BaseModel):
    detail: str


class ErrorMessage(BaseModel):
    event: Literal["error"] = "error"
    payload: ErrorPayload

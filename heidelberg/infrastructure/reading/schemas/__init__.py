from .live_schemas import (
    ClientEvent,
    ErrorMessage,
    ErrorPayload,
    NavigateEvent,
    PatchMessage,
    PatchPayload,
    RenderMessage,
    ScrollCommandMessage,
    ScrollCommandPayload,
    ScrollToEvent,
    SlidingEvent,
    client_event_adapter,
)
from .reader_schemas import ContentGroupingSchema, ReaderViewResponse, SliderSchema

__all__ = [
    "ClientEvent",
    "ContentGroupingSchema",
    "ErrorMessage",
    "ErrorPayload",
    "NavigateEvent",
    "PatchMessage",
    "PatchPayload",
    "ReaderViewResponse",
    "RenderMessage",
    "ScrollCommandMessage",
    "ScrollCommandPayload",
    "ScrollToEvent",
    "SliderSchema",
    "SlidingEvent",
    "client_event_adapter",
]

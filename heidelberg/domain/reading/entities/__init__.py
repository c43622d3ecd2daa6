from .events import ReadingPositionChanged, ScrollIntentIssued
from .navigation_event import (
    DirectLink,
    NavigationEvent,
    NavigationOrigin,
    ScrollConfirm,
    SliderDrag,
)
from .progress_controller import ProgressController, Transition
from .sync_signals import ScrollIntent, VisibilityEvent

__all__ = [
    "DirectLink",
    "NavigationEvent",
    "NavigationOrigin",
    "ProgressController",
    "ReadingPositionChanged",
    "ScrollConfirm",
    "ScrollIntent",
    "ScrollIntentIssued",
    "SliderDrag",
    "Transition",
    "VisibilityEvent",
]

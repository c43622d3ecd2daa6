"""Reading domain: the progress controller and its signals."""

from .entities import ProgressController, ScrollIntent, Transition, VisibilityEvent

__all__ = ["ProgressController", "ScrollIntent", "Transition", "VisibilityEvent"]

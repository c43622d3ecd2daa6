"""
Reference client for the reader's live session.

Models what the browser does around the rendered catechism: watching
section visibility, scrolling on request and debouncing the slider.
"""

from .debouncer import Debouncer
from .viewport import InMemoryResumeStore, ResumeStore, Viewport
from .viewport_observer import SectionWatcher, ViewportObserver, WatcherOptions

__all__ = [
    "Debouncer",
    "InMemoryResumeStore",
    "ResumeStore",
    "SectionWatcher",
    "Viewport",
    "ViewportObserver",
    "WatcherOptions",
]

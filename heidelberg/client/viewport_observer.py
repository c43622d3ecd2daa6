"""
Client-side half of the page/scroll synchronization.

The observer watches which content section dominates the viewport and
reports it to the progress controller, and it carries out the controller's
scroll intents. Two rules keep the pair from chasing each other:

- a section only counts when it is more than ``hysteresis_pages`` away from
  the page the slider shows
- a confirmation-only intent for the section already loaded never scrolls
"""

import asyncio
import inspect
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass

import structlog

from heidelberg.client.debouncer import Debouncer
from heidelberg.client.viewport import ResumeStore, Viewport
from heidelberg.domain.common.exceptions import ValidationError
from heidelberg.domain.common.value_objects import ReadingPosition, SectionId
from heidelberg.domain.reading.entities import ScrollIntent, SliderDrag, VisibilityEvent

logger = structlog.get_logger(__name__)

OutboundMessage = VisibilityEvent | SliderDrag


@dataclass(frozen=True)
class WatcherOptions:
    """Intersection settings shared by every section watcher."""

    threshold: float = 0.6
    root_margin_px: int = 20

    def __post_init__(self) -> None:
        if not 0 < self.threshold <= 1:
            raise ValueError("Intersection threshold must be in (0, 1]")


@dataclass
class SectionWatcher:
    section: SectionId
    options: WatcherOptions
    intersecting: bool = False


class ViewportObserver:
    """Mirror of the reading position living next to the rendered content."""

    def __init__(
        self,
        viewport: Viewport,
        send: Callable[[OutboundMessage], Awaitable[None] | None],
        resume_store: ResumeStore,
        session_key: str,
        *,
        slider_value: int = 1,
        max_page: int = 52,
        hysteresis_pages: int = 1,
        options: WatcherOptions | None = None,
        slider_debounce_seconds: float = 0.3,
    ) -> None:
        self._viewport = viewport
        self._send = send
        self._resume_store = resume_store
        self._session_key = session_key
        self._max_page = max_page
        self._hysteresis_pages = hysteresis_pages
        self._options = options or WatcherOptions()
        self._slider_value = ReadingPosition.clamp(slider_value, max_page).page
        self._watchers: dict[SectionId, SectionWatcher] = {}
        self._send_tasks: set[asyncio.Future[None]] = set()
        self._slider_debouncer: Debouncer[int] = Debouncer(
            slider_debounce_seconds, self._forward_slider
        )

    @property
    def slider_value(self) -> int:
        """Page the progress slider currently displays."""
        return self._slider_value

    @property
    def current_section(self) -> SectionId | None:
        """Section last settled on, as remembered in the resume store."""
        page = self._resume_store.get(self._session_key)
        return SectionId(page) if page is not None else None

    @property
    def watchers(self) -> dict[SectionId, SectionWatcher]:
        return dict(self._watchers)

    @property
    def slider_debouncer(self) -> Debouncer[int]:
        return self._slider_debouncer

    def attach(self, sections: Iterable[SectionId | str]) -> None:
        """Watch exactly ``sections``, dropping watchers from an earlier render."""
        watchers: dict[SectionId, SectionWatcher] = {}
        for raw in sections:
            section = raw if isinstance(raw, SectionId) else SectionId.parse(raw)
            watchers[section] = SectionWatcher(section=section, options=self._options)
        self._watchers = watchers
        logger.debug("sections_attached", count=len(watchers))

    def reconcile(self, page: int) -> None:
        """Adopt the authoritative page on load, overwriting the resume hint."""
        self._slider_value = ReadingPosition.clamp(page, self._max_page).page
        self._resume_store.set(self._session_key, self._slider_value)

    def on_intersection(
        self,
        section_id: SectionId | str,
        is_intersecting: bool,
        intersection_ratio: float = 1.0,
    ) -> VisibilityEvent | None:
        """
        Handle one intersection callback for a watched section.

        Returns the VisibilityEvent sent to the controller, or None when the
        crossing was not worth reporting.
        """
        try:
            section = (
                section_id if isinstance(section_id, SectionId) else SectionId.parse(section_id)
            )
        except ValidationError:
            logger.debug("intersection_ignored_malformed", section_id=section_id)
            return None

        watcher = self._watchers.get(section)
        if watcher is None:
            return None
        watcher.intersecting = is_intersecting and intersection_ratio >= self._options.threshold
        if not watcher.intersecting:
            return None
        if abs(section.page - self._slider_value) <= self._hysteresis_pages:
            return None

        # Move the slider right away, the controller confirms later.
        self._slider_value = section.page
        self._resume_store.set(self._session_key, section.page)
        event = VisibilityEvent(section=section, intersection_ratio=intersection_ratio)
        logger.debug("visibility_reported", section=str(section))
        self._emit(event)
        return event

    def on_scroll_intent(self, intent: ScrollIntent) -> bool:
        """
        Carry out a scroll intent from the controller.

        Returns True when the viewport was actually scrolled.
        """
        target = intent.target
        if intent.confirmation_only and self.current_section == target:
            self._slider_value = target.page
            return False

        section_top = self._viewport.section_offset(target)
        if section_top is None:
            logger.debug("scroll_target_missing", section=str(target))
            return False

        self._viewport.scroll_to(section_top - self._viewport.container_offset())
        self._slider_value = target.page
        self._resume_store.set(self._session_key, target.page)
        return True

    def on_slider_input(self, value: int) -> None:
        """Reader dragged the slider; forwarded once input has been quiet."""
        self._slider_value = ReadingPosition.clamp(value, self._max_page).page
        self._slider_debouncer.push(self._slider_value)

    async def drain(self) -> None:
        """Wait for messages handed to an async ``send`` to go out."""
        await self._slider_debouncer.drain()
        if self._send_tasks:
            await asyncio.gather(*self._send_tasks)

    def _forward_slider(self, page: int) -> None:
        self._emit(SliderDrag(page))

    def _emit(self, message: OutboundMessage) -> None:
        result = self._send(message)
        if inspect.isawaitable(result):
            task = asyncio.ensure_future(result)
            self._send_tasks.add(task)
            task.add_done_callback(self._send_tasks.discard)

"""
ProgressController aggregate root.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from heidelberg.domain.common.aggregate_root import AggregateRoot
from heidelberg.domain.common.value_objects import (
    DEFAULT_MAX_PAGE,
    ReaderSessionId,
    ReadingPosition,
    SectionId,
    parse_page_number,
)
from heidelberg.domain.reading.entities.events import ReadingPositionChanged, ScrollIntentIssued
from heidelberg.domain.reading.entities.navigation_event import (
    DirectLink,
    NavigationEvent,
    NavigationOrigin,
    ScrollConfirm,
    SliderDrag,
)
from heidelberg.domain.reading.entities.sync_signals import ScrollIntent
from heidelberg.domain.reading.services.url_state import DEFAULT_READER_PATH, build_reader_url

DEFAULT_HYSTERESIS_PAGES = 1


@dataclass(frozen=True)
class Transition:
    """Outcome of one event handled by the controller."""

    previous_page: int
    page: int
    patch_url: str | None = None
    scroll_intent: ScrollIntent | None = None

    @property
    def changed(self) -> bool:
        return self.previous_page != self.page

    @classmethod
    def unchanged(cls, page: int) -> Transition:
        return cls(previous_page=page, page=page)


@dataclass(eq=False)
class ProgressController(AggregateRoot[ReaderSessionId]):
    """
    Progress controller aggregate root.

    Holds the authoritative reading position of one reader session. The only
    persistent state is ``Idle(position)``; every operation is an atomic
    update of ``position`` that returns a ``Transition``.

    Business Rules:
    - The position always lies in [1, max_page]
    - Scroll reports within the hysteresis band are ignored
    - Scroll-originated changes produce confirmation-only scroll intents
    - Slider and link changes produce real scroll intents
    - At most one scroll intent is outstanding; a newer one replaces it
    """

    id: ReaderSessionId
    position: ReadingPosition
    reader_path: str = DEFAULT_READER_PATH
    hysteresis_pages: int = DEFAULT_HYSTERESIS_PAGES
    _pending_intent: ScrollIntent | None = field(default=None, repr=False)

    @classmethod
    def initialize(
        cls,
        requested_page: str | int | None = None,
        *,
        session_id: ReaderSessionId | None = None,
        max_page: int = DEFAULT_MAX_PAGE,
        reader_path: str = DEFAULT_READER_PATH,
        hysteresis_pages: int = DEFAULT_HYSTERESIS_PAGES,
    ) -> ProgressController:
        """
        Factory for a freshly loaded reader.

        Args:
            requested_page: Raw ``page`` query value, if any
            session_id: Identity to use, generated when omitted
            max_page: Upper bound of the reading position
            reader_path: Path the shareable URL is built on
            hysteresis_pages: Width of the scroll jitter band

        Returns:
            Controller in ``Idle(position)``; unparsable input lands on page 1
        """
        return cls(
            id=session_id or ReaderSessionId.generate(),
            position=ReadingPosition.parse(requested_page, max_page),
            reader_path=reader_path,
            hysteresis_pages=hysteresis_pages,
        )

    @property
    def page(self) -> int:
        return self.position.page

    @property
    def max_page(self) -> int:
        return self.position.max_page

    @property
    def url(self) -> str:
        return build_reader_url(self.reader_path, self.page)

    @property
    def pending_intent(self) -> ScrollIntent | None:
        return self._pending_intent

    def apply(self, event: NavigationEvent) -> Transition:
        """Dispatch a tagged navigation event to its transition."""
        if isinstance(event, SliderDrag):
            return self.on_slider_change(event.page, NavigationOrigin.SLIDER)
        if isinstance(event, ScrollConfirm):
            return self.on_scroll_report(event.page)
        if isinstance(event, DirectLink):
            return self.on_direct_navigation(event.page)
        raise TypeError(f"Unsupported navigation event: {event!r}")

    def on_slider_change(
        self, new_page: int, origin: NavigationOrigin = NavigationOrigin.SLIDER
    ) -> Transition:
        """
        The progress slider settled on ``new_page``.

        The URL always follows. The viewport only follows when the slider
        itself was moved; a value pushed into the slider by a scroll is
        already on screen.
        """
        scrolled = origin == NavigationOrigin.SCROLL
        previous = self.page
        self._move_to(new_page, origin)

        intent = None
        if not scrolled:
            intent = self._issue(ScrollIntent(SectionId(self.page)))

        return Transition(
            previous_page=previous,
            page=self.page,
            patch_url=build_reader_url(self.reader_path, self.page, scrolled=scrolled),
            scroll_intent=intent,
        )

    def on_scroll_report(self, observed_page: int) -> Transition:
        """
        The observer reports ``observed_page`` as the dominant section.

        Reports within the hysteresis band (including the current page) are
        dropped without touching the URL.
        """
        if self.position.distance_to(observed_page) <= self.hysteresis_pages:
            return Transition.unchanged(self.page)

        previous = self.page
        self._move_to(observed_page, NavigationOrigin.SCROLL)
        intent = self._issue(ScrollIntent(SectionId(self.page), confirmation_only=True))

        return Transition(
            previous_page=previous,
            page=self.page,
            patch_url=build_reader_url(self.reader_path, self.page, scrolled=True),
            scroll_intent=intent,
        )

    def on_direct_navigation(self, page_from_url: str | int | None) -> Transition:
        """
        The URL page changed outside the slider (history, deep link).

        The browser already shows the URL, so it is only rewritten when the
        requested value had to be corrected.
        """
        previous = self.page
        target = ReadingPosition.parse(page_from_url, self.max_page)
        self._move_to(target.page, NavigationOrigin.LINK)
        intent = self._issue(ScrollIntent(SectionId(self.page)))

        patch_url = None
        if parse_page_number(page_from_url) != self.page:
            patch_url = self.url

        return Transition(
            previous_page=previous,
            page=self.page,
            patch_url=patch_url,
            scroll_intent=intent,
        )

    def take_scroll_intent(self) -> ScrollIntent | None:
        """Consume the outstanding scroll intent, if any."""
        intent = self._pending_intent
        self._pending_intent = None
        return intent

    def _move_to(self, page: int, origin: NavigationOrigin) -> None:
        previous = self.page
        self.position = self.position.with_page(page)
        if self.page != previous:
            self._record_event(
                ReadingPositionChanged(
                    session_id=self.id,
                    previous_page=previous,
                    page=self.page,
                    origin=origin.value,
                )
            )

    def _issue(self, intent: ScrollIntent) -> ScrollIntent:
        # Supersedes any intent the client has not consumed yet.
        self._pending_intent = intent
        self._record_event(
            ScrollIntentIssued(
                session_id=self.id,
                section=str(intent.target),
                confirmation_only=intent.confirmation_only,
            )
        )
        return intent

"""Use case driving reader sessions: one progress controller per connected client."""

import asyncio
from dataclasses import dataclass

import structlog

from heidelberg.application.reading.protocols.reader_session_repository import (
    ReaderSessionRepositoryProtocol,
)
from heidelberg.domain.common.exceptions import InvariantViolationError
from heidelberg.domain.common.value_objects import ReaderSessionId, ReadingPosition, SectionId
from heidelberg.domain.reading.entities import (
    NavigationEvent,
    ProgressController,
    ScrollIntent,
    Transition,
)
from heidelberg.domain.reading.services.content_catalog import ContentCatalog, ContentGrouping
from heidelberg.domain.reading.services.url_state import build_reader_url, is_scroll_act
from heidelberg.exceptions import ReaderSessionNotFoundError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ReaderView:
    """What the client renders for a reading position."""

    page: int
    max_page: int
    grouping: ContentGrouping
    sections: list[SectionId]
    url: str


@dataclass(frozen=True)
class SessionOpened:
    """A new live session and what the client has to do first."""

    session_id: ReaderSessionId
    view: ReaderView
    scroll_intent: ScrollIntent | None = None


@dataclass(frozen=True)
class SessionUpdate:
    """Everything the client has to apply after one navigation event.

    ``view`` is only set when the content grouping changed and the sections
    have to be re-rendered.
    """

    transition: Transition
    view: ReaderView | None = None
    scroll_intent: ScrollIntent | None = None


class ReaderSessionUseCase:
    """
    Open, drive and close reader sessions.

    Events for one session are handled strictly one after another; sessions
    do not share any state.
    """

    def __init__(
        self,
        session_repository: ReaderSessionRepositoryProtocol,
        content_catalog: ContentCatalog,
        max_page: int,
        reader_path: str,
        hysteresis_pages: int = 1,
    ) -> None:
        if content_catalog.max_page < max_page:
            raise InvariantViolationError(
                "ReaderSessionUseCase",
                f"content ends at page {content_catalog.max_page}, slider reaches {max_page}",
            )
        self.session_repository = session_repository
        self.content_catalog = content_catalog
        self.max_page = max_page
        self.reader_path = reader_path
        self.hysteresis_pages = hysteresis_pages
        self._locks: dict[ReaderSessionId, asyncio.Lock] = {}

    def describe(self, requested_page: str | int | None) -> ReaderView:
        """
        View state for a plain page load.

        Args:
            requested_page: Raw ``page`` query value, if any

        Returns:
            ReaderView for the clamped page; bad input falls back to page 1
        """
        position = ReadingPosition.parse(requested_page, self.max_page)
        return self._view(position.page)

    def canonical_url(self, requested_page: str | int | None) -> str:
        """Clean URL for a page load, without the scroll marker."""
        position = ReadingPosition.parse(requested_page, self.max_page)
        return build_reader_url(self.reader_path, position.page)

    def open_session(
        self, requested_page: str | int | None = None, act: str | None = None
    ) -> SessionOpened:
        """
        Start a live session for a freshly mounted reader.

        A page carried in the URL is a deep link and gets a real scroll
        intent, unless the URL marks it as reached by scrolling.
        """
        controller = ProgressController.initialize(
            requested_page,
            max_page=self.max_page,
            reader_path=self.reader_path,
            hysteresis_pages=self.hysteresis_pages,
        )
        intent = None
        if requested_page is not None and not is_scroll_act(act):
            intent = controller.on_direct_navigation(requested_page).scroll_intent

        self.session_repository.add(controller)
        self._locks[controller.id] = asyncio.Lock()
        self._log_events(controller)
        logger.info("reader_session_opened", session_id=str(controller.id), page=controller.page)

        return SessionOpened(
            session_id=controller.id,
            view=self._view(controller.page),
            scroll_intent=intent,
        )

    async def handle(self, session_id: ReaderSessionId, event: NavigationEvent) -> SessionUpdate:
        """
        Feed one navigation event to a session's controller.

        Raises:
            ReaderSessionNotFoundError: If the session is not open
        """
        controller = self._get_controller(session_id)
        async with self._locks[session_id]:
            previous_grouping = self.content_catalog.grouping_for(controller.page)
            transition = controller.apply(event)
            # The transition's intent is the one outstanding intent; hand it out.
            intent = controller.take_scroll_intent()
            self._log_events(controller)

            view = None
            if self.content_catalog.grouping_for(transition.page) != previous_grouping:
                view = self._view(transition.page)

            return SessionUpdate(
                transition=transition,
                view=view,
                scroll_intent=intent,
            )

    def get_position(self, session_id: ReaderSessionId) -> int:
        """Authoritative page of an open session."""
        return self._get_controller(session_id).page

    def close_session(self, session_id: ReaderSessionId) -> None:
        """Forget a session once its client disconnected."""
        self._locks.pop(session_id, None)
        if self.session_repository.remove(session_id):
            logger.info("reader_session_closed", session_id=str(session_id))

    def _get_controller(self, session_id: ReaderSessionId) -> ProgressController:
        controller = self.session_repository.find_by_id(session_id)
        if controller is None or session_id not in self._locks:
            raise ReaderSessionNotFoundError(str(session_id))
        return controller

    def _view(self, page: int) -> ReaderView:
        grouping = self.content_catalog.grouping_for(page)
        return ReaderView(
            page=page,
            max_page=self.max_page,
            grouping=grouping,
            sections=grouping.sections,
            url=build_reader_url(self.reader_path, page),
        )

    def _log_events(self, controller: ProgressController) -> None:
        for event in controller.collect_events():
            logger.info("reader_domain_event", **event.to_dict())

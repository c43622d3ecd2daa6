"""In-memory store of open reader sessions."""

import structlog

from heidelberg.domain.common.value_objects import ReaderSessionId
from heidelberg.domain.reading.entities import ProgressController

logger = structlog.get_logger(__name__)


class InMemoryReaderSessionRepository:
    """
    Progress controllers of the sessions connected to this process.

    Reading positions are never persisted beyond the URL, so a session only
    lives as long as its client connection.
    """

    def __init__(self) -> None:
        self._controllers: dict[ReaderSessionId, ProgressController] = {}

    def add(self, controller: ProgressController) -> ProgressController:
        self._controllers[controller.id] = controller
        logger.debug("reader_session_stored", session_id=str(controller.id))
        return controller

    def find_by_id(self, session_id: ReaderSessionId) -> ProgressController | None:
        return self._controllers.get(session_id)

    def remove(self, session_id: ReaderSessionId) -> bool:
        return self._controllers.pop(session_id, None) is not None

    def count(self) -> int:
        return len(self._controllers)

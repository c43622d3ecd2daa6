"""Reader routes: plain page loads and the live session socket."""

import structlog
from fastapi import APIRouter, Depends, Query, WebSocket, WebSocketDisconnect, status
from fastapi.responses import RedirectResponse, Response
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from heidelberg.application.reading.use_cases.reader_session_use_case import (
    ReaderSessionUseCase,
)
from heidelberg.config import get_settings
from heidelberg.core import container
from heidelberg.domain.reading.services.url_state import is_scroll_act
from heidelberg.exceptions import MalformedLiveEventError
from heidelberg.infrastructure.common.di import inject_use_case
from heidelberg.infrastructure.reading.schemas import (
    ErrorMessage,
    ErrorPayload,
    PatchMessage,
    PatchPayload,
    ReaderViewResponse,
    RenderMessage,
    ScrollCommandMessage,
    client_event_adapter,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix=get_settings().READER_PATH, tags=["reader"])


@router.get(
    "",
    response_model=ReaderViewResponse,
    status_code=status.HTTP_200_OK,
)
async def get_reader_view(
    page: str | None = Query(None, description="Page to open, 1..MAX_PAGE"),
    act: str | None = Query(None, description="'scroll' when the page was reached by scrolling"),
    use_case: ReaderSessionUseCase = Depends(
        inject_use_case(container.reader_session_use_case)
    ),
) -> ReaderViewResponse | Response:
    """
    Get the view state for a page load.

    A fresh load has no scroll to confirm, so a URL still carrying
    ``act=scroll`` is redirected to its clean form. Bad page values never
    fail the request: they fall back to page 1 or clamp into range.
    """
    if is_scroll_act(act):
        return RedirectResponse(
            url=use_case.canonical_url(page),
            status_code=status.HTTP_307_TEMPORARY_REDIRECT,
        )

    return ReaderViewResponse.from_view(use_case.describe(page))


@router.websocket("/live")
async def reader_live_session(
    websocket: WebSocket,
    page: str | None = None,
    act: str | None = None,
    use_case: ReaderSessionUseCase = Depends(
        inject_use_case(container.reader_session_use_case)
    ),
) -> None:
    """
    Live session for one mounted reader.

    Frames from the client are handled one at a time, in arrival order.
    Malformed frames are answered with an ``error`` event and the session
    stays open.
    """
    await websocket.accept()
    opened = use_case.open_session(page, act)
    session_id = opened.session_id
    log = logger.bind(session_id=str(session_id))

    try:
        await _send(
            websocket,
            RenderMessage(payload=ReaderViewResponse.from_view(opened.view, str(session_id))),
        )
        if opened.scroll_intent is not None:
            await _send(websocket, ScrollCommandMessage.from_intent(opened.scroll_intent))

        while True:
            frame = await websocket.receive_text()
            try:
                event = client_event_adapter.validate_json(frame).to_navigation_event()
            except (PydanticValidationError, MalformedLiveEventError) as e:
                log.warning("live_event_rejected", error=str(e))
                await _send(websocket, ErrorMessage(payload=ErrorPayload(detail=str(e))))
                continue

            update = await use_case.handle(session_id, event)
            log.debug(
                "live_event_handled",
                navigation=type(event).__name__,
                previous_page=update.transition.previous_page,
                page=update.transition.page,
            )

            if update.view is not None:
                await _send(
                    websocket,
                    RenderMessage(
                        payload=ReaderViewResponse.from_view(update.view, str(session_id))
                    ),
                )
            if update.transition.patch_url is not None:
                await _send(
                    websocket, PatchMessage(payload=PatchPayload(to=update.transition.patch_url))
                )
            if update.scroll_intent is not None:
                await _send(websocket, ScrollCommandMessage.from_intent(update.scroll_intent))
    except WebSocketDisconnect:
        log.info("live_session_disconnected")
    finally:
        use_case.close_session(session_id)


async def _send(websocket: WebSocket, message: BaseModel) -> None:
    await websocket.send_json(message.model_dump(mode="json"))

from fastapi import APIRouter

from heidelberg.config import get_settings
from heidelberg.infrastructure.common.schemas import ReaderSettingsResponse

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("")
async def get_reader_settings() -> ReaderSettingsResponse:
    """
    Get public reader settings.

    The client reads these to configure its slider debounce and its
    section visibility watchers. This is a public endpoint.
    """
    settings = get_settings()

    return ReaderSettingsResponse(
        max_page=settings.MAX_PAGE,
        reader_path=settings.READER_PATH,
        slider_debounce_ms=settings.SLIDER_DEBOUNCE_MS,
        intersection_threshold=settings.INTERSECTION_THRESHOLD,
        intersection_root_margin_px=settings.INTERSECTION_ROOT_MARGIN_PX,
        hysteresis_pages=settings.HYSTERESIS_PAGES,
    )

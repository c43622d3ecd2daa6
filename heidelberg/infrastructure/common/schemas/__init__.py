"""Common infrastructure schemas."""

from heidelberg.infrastructure.common.schemas.response_wrappers import (
    HealthResponse,
    MessageResponse,
)
from heidelberg.infrastructure.common.schemas.settings_schemas import ReaderSettingsResponse

__all__ = [
    "HealthResponse",
    "MessageResponse",
    "ReaderSettingsResponse",
]

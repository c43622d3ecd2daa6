from .reader_session_use_case import (
    ReaderSessionUseCase,
    ReaderView,
    SessionOpened,
    SessionUpdate,
)

__all__ = ["ReaderSessionUseCase", "ReaderView", "SessionOpened", "SessionUpdate"]

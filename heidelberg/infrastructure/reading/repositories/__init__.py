from .reader_session_repository import InMemoryReaderSessionRepository

__all__ = ["InMemoryReaderSessionRepository"]

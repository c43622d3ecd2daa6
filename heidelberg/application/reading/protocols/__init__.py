from .reader_session_repository import ReaderSessionRepositoryProtocol

__all__ = ["ReaderSessionRepositoryProtocol"]

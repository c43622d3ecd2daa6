"""Custom exception hierarchy for the Heidelberg reader."""


class HeidelbergError(Exception):
    """Base exception for all reader application errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(HeidelbergError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class ReaderSessionNotFoundError(NotFoundError):
    """Reader session not found error."""

    def __init__(self, session_id: str | None = None, *, message: str | None = None) -> None:
        """Initialize with session ID or custom message."""
        self.session_id = session_id
        if message:
            super().__init__(message)
        elif session_id is not None:
            super().__init__(f"Reader session {session_id} not found")
        else:
            super().__init__("Reader session not found")


class ValidationError(HeidelbergError):
    """Validation error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 422 status code."""
        super().__init__(message, status_code=422)


class MalformedLiveEventError(ValidationError):
    """A live session frame that does not match the wire contract."""

    def __init__(self, reason: str) -> None:
        """Initialize with the reason the frame was rejected."""
        self.reason = reason
        super().__init__(f"Malformed live event: {reason}")

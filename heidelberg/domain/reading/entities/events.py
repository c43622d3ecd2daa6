"""Domain events recorded by the progress controller."""

from dataclasses import dataclass

from heidelberg.domain.common.domain_event import DomainEvent
from heidelberg.domain.common.value_objects import ReaderSessionId


@dataclass(frozen=True, kw_only=True)
class ReadingPositionChanged(DomainEvent):
    session_id: ReaderSessionId
    previous_page: int
    page: int
    origin: str


@dataclass(frozen=True, kw_only=True)
class ScrollIntentIssued(DomainEvent):
    session_id: ReaderSessionId
    section: str
    confirmation_only: bool

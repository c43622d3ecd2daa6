"""
Base class for Domain Events.

Domain Events are immutable records of something that happened to an
aggregate, e.g. the reading position moving or a scroll intent being issued.

Example:
    @dataclass(frozen=True)
    class ReadingPositionChanged(DomainEvent):
        previous_page: int
        page: int
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True)
class DomainEvent:
    """
    Base class for Domain Events.

    Subclasses are frozen dataclasses named in past tense.
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def event_type(self) -> str:
        """Return the event type name for serialization."""
        return self.__class__.__name__

    def to_dict(self) -> dict[str, object]:
        """Convert event to dictionary for serialization and logging."""
        result: dict[str, object] = {}
        for key, value in self.__dict__.items():
            if isinstance(value, datetime):
                result[key] = value.isoformat()
            elif isinstance(value, UUID):
                result[key] = str(value)
            elif hasattr(value, "to_primitive"):
                result[key] = value.to_primitive()
            else:
                result[key] = value
        result["event_type"] = self.event_type
        return result

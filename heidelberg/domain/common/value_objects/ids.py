from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class ReaderSessionId(EntityId):
    """Strongly-typed identifier of one connected reader session."""

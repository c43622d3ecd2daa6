"""
Base class for Aggregate Roots.

An aggregate root is the single entry point to a consistency boundary. The
progress controller of a reader session is one: every change to the
reading position goes through it and is recorded as a domain event.
"""

from dataclasses import dataclass, field
from typing import Generic

from .domain_event import DomainEvent
from .entity import Entity, IdType


@dataclass(eq=False)
class AggregateRoot(Entity[IdType], Generic[IdType]):
    """
    Base class for Aggregate Roots in the domain model.

    Domain events are collected here and drained by the application layer
    once a transition has been handled. Equality stays identity-based, so
    subclasses are declared with ``eq=False`` as well.
    """

    _events: list[DomainEvent] = field(
        default_factory=list, repr=False, compare=False, kw_only=True
    )

    def _record_event(self, event: DomainEvent) -> None:
        """Record a domain event to be dispatched later."""
        self._events.append(event)

    def collect_events(self) -> list[DomainEvent]:
        """Collect and clear all recorded domain events."""
        events = self._events.copy()
        self._events.clear()
        return events

    @property
    def pending_events(self) -> list[DomainEvent]:
        """Return pending events without clearing them."""
        return self._events.copy()

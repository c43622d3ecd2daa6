"""
Domain common module.

Contains base classes for domain modeling:
- Entity: Objects with identity and lifecycle
- AggregateRoot: Consistency boundaries with domain events
- DomainEvent: Notifications of significant domain occurrences
"""

from .aggregate_root import AggregateRoot
from .domain_event import DomainEvent
from .entity import Entity, EntityId
from .exceptions import (
    DomainError,
    InvariantViolationError,
    ValidationError,
)

__all__ = [
    "AggregateRoot",
    "DomainError",
    "DomainEvent",
    "Entity",
    "EntityId",
    "InvariantViolationError",
    "ValidationError",
]

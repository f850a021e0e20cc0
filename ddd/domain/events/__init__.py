"""Domain events package."""

from ddd.domain.events.domain_event import DomainEvent
from ddd.domain.events.event_handler import EventHandler

__all__ = [
    "DomainEvent",
    "EventHandler",
]

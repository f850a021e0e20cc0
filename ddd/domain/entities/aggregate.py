"""Aggregate contract and aggregate root helper."""

from typing import Any, Protocol, runtime_checkable

from ddd.domain.entities.entity import Entity


@runtime_checkable
class Aggregate(Entity, Protocol):
    """
    Cluster of entities and value objects treated as a single unit.

    The aggregate root is the only entry point for changes inside its
    boundary and is responsible for keeping that boundary consistent.
    """

    def pull_events(self) -> list[Any]:
        """Return and forget the domain events recorded since the last pull."""
        ...


class AggregateRoot:
    """
    Helper base for aggregates that record domain events.

    State changes call ``record_event``; after the unit of work commits,
    the application drains ``pull_events`` into an event dispatcher.

    Example:
        class Order(AggregateRoot):
            def __init__(self, id: UUID):
                super().__init__()
                self.id = id

            def place(self) -> None:
                self.record_event(OrderPlaced(order_id=str(self.id)))
    """

    def __init__(self) -> None:
        self._pending_events: list[Any] = []

    def record_event(self, event: Any) -> None:
        """
        Record a domain event raised by this aggregate.

        Args:
            event: Domain event to publish later
        """
        self._pending_events.append(event)

    def pull_events(self) -> list[Any]:
        """
        Drain recorded domain events.

        Returns:
            Events in the order they were recorded
        """
        events = self._pending_events[:]
        self._pending_events.clear()
        return events

    @property
    def has_pending_events(self) -> bool:
        """Check if events are waiting to be pulled."""
        return bool(self._pending_events)

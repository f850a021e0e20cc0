"""Domain event base."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone


def _new_event_id() -> str:
    return str(uuid.uuid4())


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class DomainEvent:
    """
    Immutable base for domain events.

    A domain event records that something meaningful happened in the
    domain. Subclasses add their payload as further fields with defaults.
    The dispatcher does not require this base: any object can be
    published, and listeners tell events apart with ``isinstance``.

    Shared fields:
        event_id: Unique identity (UUID4), usable as an idempotency key
        occurred_at: UTC creation time
        correlation_id: Groups events originating from the same trigger

    Example:
        @dataclass(frozen=True)
        class OrderPlaced(DomainEvent):
            order_id: str = ""
    """

    event_id: str = field(default_factory=_new_event_id)
    occurred_at: datetime = field(default_factory=_utc_now)
    correlation_id: str = ""

    @property
    def event_name(self) -> str:
        """Name of the concrete event type."""
        return self.__class__.__name__

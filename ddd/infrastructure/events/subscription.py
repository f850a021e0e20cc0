"""Subscription handles and dead-letter records for the event dispatcher."""

import time
import uuid
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

Listener = Callable[[Any], None]


def _new_subscription_id() -> str:
    return str(uuid.uuid4())


def listener_name(listener: Listener) -> str:
    """Readable name of a listener for logs and dead letters."""
    name = getattr(listener, "__qualname__", None)
    if name is None:
        name = type(listener).__qualname__
    return name


@dataclass(frozen=True)
class Subscription:
    """
    Opaque handle for one listener registration.

    Each call to ``subscribe`` creates a new handle, even for a listener
    that is already registered. Handles compare and hash by ``id`` only.
    """

    listener: Listener = field(compare=False)
    event_type: Optional[type] = field(default=None, compare=False)
    id: str = field(default_factory=_new_subscription_id)

    def matches(self, event: Any) -> bool:
        """Check if ``event`` should be delivered through this subscription."""
        return self.event_type is None or isinstance(event, self.event_type)

    @property
    def listener_name(self) -> str:
        return listener_name(self.listener)


@dataclass(frozen=True)
class DeadLetter:
    """Record of a listener failure during delivery."""

    event: Any
    subscription_id: str
    listener: str
    error: str
    timestamp: float = field(default_factory=time.monotonic)

    @property
    def event_type(self) -> str:
        return type(self.event).__name__

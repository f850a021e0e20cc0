"""Event dispatching package."""

from ddd.infrastructure.events.dispatcher import (
    DispatcherState,
    EventDispatcher,
    ListenerErrorCallback,
    create_event_dispatcher,
    event_dispatcher,
    get_event_dispatcher,
)
from ddd.infrastructure.events.subscription import DeadLetter, Listener, Subscription

__all__ = [
    "DeadLetter",
    "DispatcherState",
    "EventDispatcher",
    "Listener",
    "ListenerErrorCallback",
    "Subscription",
    "create_event_dispatcher",
    "event_dispatcher",
    "get_event_dispatcher",
]

"""In-process event dispatcher.

Design goals
------------
1.  **Multicast** - every event is delivered to every listener subscribed
    when ``publish()`` starts, optionally filtered by event type
    (``isinstance`` match).
2.  **Snapshot delivery** - the registry is copied under a lock and the
    listeners run outside it, so listeners may subscribe or unsubscribe
    while being called. New subscriptions only see later events.
3.  **Failure isolation** - a listener that raises is logged, counted and
    recorded as a dead letter. The publisher and the other listeners are
    unaffected.
4.  **Explicit lifecycle** - ``OPEN -> CLOSED``. ``subscribe`` on a closed
    dispatcher raises ``DispatcherClosedError``; ``publish`` on a closed
    dispatcher delivers nothing and logs a warning; ``unsubscribe`` and
    ``close`` are always safe.

Delivery is synchronous on the publisher's thread by default. When an
``Executor`` is supplied, each delivery is submitted to it and
``publish()`` returns once the events are handed off.

This module also owns the process-wide ``event_dispatcher`` instance.
It is created on first import and never closed implicitly; applications
that need a defined lifetime should construct their own dispatcher and
pass it explicitly.
"""

import logging
import threading
from collections import defaultdict, deque
from concurrent.futures import Executor, ThreadPoolExecutor
from enum import Enum
from typing import Any, Callable, Optional, get_origin

from ddd.core.config import Settings, settings as default_settings
from ddd.domain.events import EventHandler
from ddd.domain.exceptions import DispatcherClosedError
from ddd.infrastructure.events.subscription import DeadLetter, Listener, Subscription

logger = logging.getLogger(__name__)

# Called as (event, subscription, exception) after a listener fails.
ListenerErrorCallback = Callable[[Any, Subscription, Exception], None]


class DispatcherState(str, Enum):
    """Lifecycle state of an event dispatcher."""

    OPEN = "open"
    CLOSED = "closed"


class EventDispatcher:
    """Multicast publish/subscribe channel for domain events.

    Parameters
    ----------
    executor
        Optional executor used to run deliveries off the publisher's
        thread. ``None`` (default) delivers synchronously, in
        subscription order.
    owns_executor
        When ``True``, ``close()`` shuts the executor down.
    on_listener_error
        Optional callback fired after a listener fails. Its own errors
        are logged and swallowed.
    max_dead_letters
        Number of dead letters kept; oldest are dropped first.
    """

    def __init__(
        self,
        *,
        executor: Optional[Executor] = None,
        owns_executor: bool = False,
        on_listener_error: Optional[ListenerErrorCallback] = None,
        max_dead_letters: int = 1000,
    ) -> None:
        self._lock = threading.Lock()
        self._subscriptions: dict[str, Subscription] = {}
        self._state = DispatcherState.OPEN
        self._executor = executor
        self._owns_executor = owns_executor
        self._on_listener_error = on_listener_error

        # Observability
        self._error_counts: dict[str, int] = defaultdict(int)
        self._dead_letters: deque[DeadLetter] = deque(maxlen=max_dead_letters)
        self._messages_delivered: int = 0

    # -- Lifecycle ---------------------------------------------------------

    @property
    def state(self) -> DispatcherState:
        return self._state

    @property
    def is_closed(self) -> bool:
        return self._state is DispatcherState.CLOSED

    def close(self) -> None:
        """Close the dispatcher and release its subscribers. Idempotent."""
        with self._lock:
            if self._state is DispatcherState.CLOSED:
                return
            self._state = DispatcherState.CLOSED
            released = len(self._subscriptions)
            self._subscriptions.clear()
            executor = self._executor if self._owns_executor else None

        if executor is not None:
            executor.shutdown(wait=False)

        logger.debug("Event dispatcher closed, released %d subscriptions", released)

    def __enter__(self) -> "EventDispatcher":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # -- Core API ----------------------------------------------------------

    def subscribe(
        self,
        listener: Listener,
        event_type: Optional[type] = None,
    ) -> Subscription:
        """Register *listener* for subsequently published events.

        Parameters
        ----------
        listener
            Callable invoked with each event.
        event_type
            When given, only instances of this type are delivered.

        Raises
        ------
        DispatcherClosedError
            If the dispatcher is closed.
        TypeError
            If *listener* is not callable or *event_type* is not a plain
            class (strings and parameterized generics are rejected).
        """
        if not callable(listener):
            raise TypeError(f"listener must be callable, got {type(listener).__name__}")
        if event_type is not None and (
            not isinstance(event_type, type) or get_origin(event_type) is not None
        ):
            raise TypeError(f"event_type must be a class, got {event_type!r}")

        subscription = Subscription(listener=listener, event_type=event_type)
        with self._lock:
            if self._state is DispatcherState.CLOSED:
                raise DispatcherClosedError("subscribe")
            self._subscriptions[subscription.id] = subscription

        logger.debug(
            "Subscribed %s (event_type=%s, id=%s)",
            subscription.listener_name,
            event_type.__name__ if event_type else "*",
            subscription.id,
        )
        return subscription

    def subscribe_handler(self, handler: EventHandler) -> list[Subscription]:
        """Register an ``EventHandler`` for each of its ``event_types``.

        A handler without ``event_types`` receives every event. Overlapping
        types (a class and one of its subclasses) deliver such events once
        per matching entry.
        """
        if not handler.event_types:
            return [self.subscribe(handler)]
        return [self.subscribe(handler, event_type) for event_type in handler.event_types]

    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove *subscription*. Unknown or removed handles are ignored."""
        with self._lock:
            removed = self._subscriptions.pop(subscription.id, None)

        if removed is not None:
            logger.debug("Unsubscribed %s (id=%s)", removed.listener_name, removed.id)

    def publish(self, event: Any) -> None:
        """Deliver *event* to every matching listener subscribed right now.

        Listener failures never propagate to the caller. On a closed
        dispatcher the event is dropped.
        """
        with self._lock:
            if self._state is DispatcherState.CLOSED:
                snapshot = None
            else:
                snapshot = [
                    subscription
                    for subscription in self._subscriptions.values()
                    if subscription.matches(event)
                ]
            executor = self._executor

        if snapshot is None:
            logger.warning(
                "Dropped %s published on a closed event dispatcher",
                type(event).__name__,
            )
            return

        for subscription in snapshot:
            if executor is None:
                self._deliver(subscription, event)
                continue
            try:
                executor.submit(self._deliver, subscription, event)
            except RuntimeError:
                # Executor shut down by a concurrent close().
                logger.warning(
                    "Dropped %s for %s: executor is shut down",
                    type(event).__name__,
                    subscription.listener_name,
                )

    def _deliver(self, subscription: Subscription, event: Any) -> None:
        try:
            subscription.listener(event)
        except Exception as exc:
            logger.exception(
                "Listener error: listener=%s event=%s",
                subscription.listener_name,
                type(event).__name__,
            )
            self._record_failure(subscription, event, exc)
            return

        with self._lock:
            self._messages_delivered += 1

    def _record_failure(
        self,
        subscription: Subscription,
        event: Any,
        exc: Exception,
    ) -> None:
        with self._lock:
            self._error_counts[type(event).__name__] += 1
            self._dead_letters.append(
                DeadLetter(
                    event=event,
                    subscription_id=subscription.id,
                    listener=subscription.listener_name,
                    error=str(exc),
                )
            )

        if self._on_listener_error is not None:
            try:
                self._on_listener_error(event, subscription, exc)
            except Exception:
                logger.warning("on_listener_error callback failed", exc_info=True)

    # -- Observability -----------------------------------------------------

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscriptions)

    @property
    def messages_delivered(self) -> int:
        """Total successful listener invocations."""
        return self._messages_delivered

    def get_error_counts(self) -> dict[str, int]:
        """Return ``{event_type_name: listener_failure_count}``."""
        with self._lock:
            return dict(self._error_counts)

    @property
    def dead_letters(self) -> list[DeadLetter]:
        """Snapshot of recorded listener failures."""
        with self._lock:
            return list(self._dead_letters)

    def clear_dead_letters(self) -> list[DeadLetter]:
        """Drain and return dead letters."""
        with self._lock:
            drained = list(self._dead_letters)
            self._dead_letters.clear()
        return drained

    def __repr__(self) -> str:
        return (
            f"EventDispatcher(state={self._state.value}, "
            f"subscribers={len(self._subscriptions)})"
        )


def create_event_dispatcher(
    settings: Optional[Settings] = None,
    on_listener_error: Optional[ListenerErrorCallback] = None,
) -> EventDispatcher:
    """
    Build an event dispatcher from settings.

    With ``event_dispatcher_max_workers > 0`` the dispatcher owns a thread
    pool of that size and shuts it down on ``close()``.

    Args:
        settings: Settings to use, defaults to the module-level instance
        on_listener_error: Optional listener-failure callback

    Returns:
        A new, open EventDispatcher
    """
    settings = settings or default_settings

    executor = None
    if settings.is_dispatch_async:
        executor = ThreadPoolExecutor(
            max_workers=settings.event_dispatcher_max_workers,
            thread_name_prefix="ddd-events",
        )

    return EventDispatcher(
        executor=executor,
        owns_executor=executor is not None,
        on_listener_error=on_listener_error,
        max_dead_letters=settings.event_dispatcher_max_dead_letters,
    )


# Process-wide default dispatcher: created once, never closed implicitly.
event_dispatcher = create_event_dispatcher()


def get_event_dispatcher() -> EventDispatcher:
    """Return the process-wide default dispatcher."""
    return event_dispatcher

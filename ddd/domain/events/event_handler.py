"""Event handler base."""

from abc import ABC, abstractmethod
from typing import Any, ClassVar


class EventHandler(ABC):
    """
    Base class for objects reacting to dispatched domain events.

    Handlers are callable, so an instance can be passed straight to
    ``EventDispatcher.subscribe``. Set ``event_types`` to restrict which
    events ``EventDispatcher.subscribe_handler`` routes to the handler;
    an empty tuple means every event.

    Example:
        class SendWelcomeEmail(EventHandler):
            event_types = (UserRegistered,)

            def handle(self, event: UserRegistered) -> None:
                ...
    """

    event_types: ClassVar[tuple[type, ...]] = ()

    @abstractmethod
    def handle(self, event: Any) -> None:
        """
        Process one domain event.

        Args:
            event: Event delivered by the dispatcher
        """

    def __call__(self, event: Any) -> None:
        self.handle(event)

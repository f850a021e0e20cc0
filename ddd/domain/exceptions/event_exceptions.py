"""Event dispatching domain exceptions."""

from ddd.domain.exceptions.base import DomainException


class EventDispatcherException(DomainException):
    """Base exception for event-dispatcher errors."""


class DispatcherClosedError(EventDispatcherException):
    """Raised when an operation requires an open dispatcher."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(
            message=f"Cannot {operation}: event dispatcher is closed",
            code="DISPATCHER_CLOSED"
        )

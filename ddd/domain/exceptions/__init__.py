"""Domain exceptions package."""

from ddd.domain.exceptions.base import DomainException
from ddd.domain.exceptions.event_exceptions import (
    DispatcherClosedError,
    EventDispatcherException,
)
from ddd.domain.exceptions.value_object_exceptions import (
    InvalidValueObjectError,
    ValueObjectDomainException,
)

__all__ = [
    # Base
    "DomainException",
    # Value object exceptions
    "ValueObjectDomainException",
    "InvalidValueObjectError",
    # Event dispatcher exceptions
    "EventDispatcherException",
    "DispatcherClosedError",
]

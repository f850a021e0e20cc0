"""Domain-Driven Design building blocks.

Value objects with declarative validation, an in-process event dispatcher,
and the protocols (entities, aggregates, repositories, units of work,
mappers, factories, specifications) that application code implements.
"""

from ddd.application.dto import DTO
from ddd.application.ports.outbound import MapperPort, RepositoryPort, UnitOfWorkPort
from ddd.domain.entities import Aggregate, AggregateRoot, Entity
from ddd.domain.events import DomainEvent, EventHandler
from ddd.domain.exceptions import (
    DispatcherClosedError,
    DomainException,
    InvalidValueObjectError,
)
from ddd.domain.factory import FactoryPort
from ddd.domain.services import DomainService, Specification
from ddd.domain.value_objects import Failure, ValidatedValue, Validator, ValueObject
from ddd.infrastructure.events import (
    DispatcherState,
    EventDispatcher,
    Subscription,
    create_event_dispatcher,
    event_dispatcher,
    get_event_dispatcher,
)

__version__ = "0.1.0"

__all__ = [
    "Aggregate",
    "AggregateRoot",
    "DTO",
    "DispatcherClosedError",
    "DispatcherState",
    "DomainEvent",
    "DomainException",
    "DomainService",
    "Entity",
    "EventDispatcher",
    "EventHandler",
    "FactoryPort",
    "Failure",
    "InvalidValueObjectError",
    "MapperPort",
    "RepositoryPort",
    "Specification",
    "Subscription",
    "UnitOfWorkPort",
    "ValidatedValue",
    "Validator",
    "ValueObject",
    "create_event_dispatcher",
    "event_dispatcher",
    "get_event_dispatcher",
]

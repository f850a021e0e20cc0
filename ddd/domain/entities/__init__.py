"""Domain entity contracts package."""

from ddd.domain.entities.aggregate import Aggregate, AggregateRoot
from ddd.domain.entities.entity import Entity

__all__ = [
    "Aggregate",
    "AggregateRoot",
    "Entity",
]

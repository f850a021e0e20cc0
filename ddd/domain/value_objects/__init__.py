"""Domain value objects package."""

from ddd.domain.value_objects.failure import Failure
from ddd.domain.value_objects.validators import (
    contains,
    in_range,
    matches,
    max_length,
    min_length,
    not_empty,
    predicate,
)
from ddd.domain.value_objects.value_object import ValidatedValue, Validator, ValueObject

__all__ = [
    "Failure",
    "ValidatedValue",
    "Validator",
    "ValueObject",
    # Validators
    "contains",
    "in_range",
    "matches",
    "max_length",
    "min_length",
    "not_empty",
    "predicate",
]

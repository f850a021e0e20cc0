"""Value object domain exceptions."""

from typing import TYPE_CHECKING, Sequence

from ddd.domain.exceptions.base import DomainException

if TYPE_CHECKING:
    from ddd.domain.value_objects.failure import Failure


class ValueObjectDomainException(DomainException):
    """Base exception for value-object-related domain errors."""


class InvalidValueObjectError(ValueObjectDomainException):
    """Raised when an invalid value object is required to be valid."""

    def __init__(self, type_name: str, failures: Sequence["Failure"]):
        self.type_name = type_name
        self.failures = list(failures)
        reasons = "; ".join(failure.message for failure in self.failures)
        super().__init__(
            message=f"Invalid {type_name}: {reasons}",
            code="INVALID_VALUE_OBJECT"
        )

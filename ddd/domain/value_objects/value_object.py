"""Value object base with declarative validation."""

from dataclasses import dataclass
from typing import Callable, Generic, Optional, Sequence, TypeVar

from ddd.domain.exceptions import InvalidValueObjectError
from ddd.domain.value_objects.failure import Failure

T = TypeVar("T")

Validator = Callable[[T], Optional[Failure]]
"""A pure function returning ``None`` for a valid candidate or one ``Failure``."""


@dataclass(frozen=True, eq=False, repr=False)
class ValueObject(Generic[T]):
    """
    Value object wrapping an immutable value and its validation rules.

    Validators run in order on every access to ``failures``; none of them
    short-circuits another. Being invalid is a normal outcome expressed as
    data, so construction never raises for an invalid value. Call
    ``ensure_valid()`` where an invalid value must stop the flow.

    Example:
        class Email(ValueObject[str]):
            def __init__(self, email: str):
                super().__init__(email, validators=[not_empty(), contains("@")])

        email = Email("ok@example.com")
        email.is_valid  # True
    """

    value: T
    validators: Sequence[Validator[T]] = ()

    def __post_init__(self) -> None:
        """Freeze the validator sequence."""
        object.__setattr__(self, "validators", tuple(self.validators))

    @property
    def failures(self) -> list[Failure]:
        """Failures returned by the validators, in validator order."""
        failures = []
        for validator in self.validators:
            failure = validator(self.value)
            if failure is not None:
                failures.append(failure)
        return failures

    @property
    def is_valid(self) -> bool:
        """Check if no validator reported a failure."""
        return not self.failures

    @property
    def is_not_valid(self) -> bool:
        """Check if at least one validator reported a failure."""
        return not self.is_valid

    @property
    def first_failure_message(self) -> Optional[str]:
        """Message of the first failure, or None when valid."""
        failures = self.failures
        return failures[0].message if failures else None

    def ensure_valid(self) -> "ValueObject[T]":
        """
        Return this value object if it is valid.

        Returns:
            Self, unchanged

        Raises:
            InvalidValueObjectError: If any validator reported a failure
        """
        failures = self.failures
        if failures:
            raise InvalidValueObjectError(self.__class__.__name__, failures)
        return self

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(value={self.value!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return False
        return self.value == other.value

    def __hash__(self) -> int:
        return hash((self.__class__, self.value))


ValidatedValue = ValueObject

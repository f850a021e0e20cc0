"""
Reusable validator factories for value objects.

Each factory returns a ``Validator``: a pure callable that returns ``None``
when the candidate is valid and a single ``Failure`` otherwise. Every
factory accepts a ``message`` override so application code can keep its
own wording.
"""

import re
from typing import Any, Callable, Optional, Union

from ddd.domain.value_objects.failure import Failure
from ddd.domain.value_objects.value_object import Validator

NOT_EMPTY_MESSAGE = "value must not be empty"


def not_empty(message: str = NOT_EMPTY_MESSAGE) -> Validator[Any]:
    """
    Reject empty values.

    Strings are stripped before the check, so whitespace-only strings are
    empty. Other sized values are empty when their length is zero; ``None``
    is always empty.
    """

    def validate(value: Any) -> Optional[Failure]:
        if value is None:
            return Failure(message)
        if isinstance(value, str):
            return Failure(message) if not value.strip() else None
        if hasattr(value, "__len__") and len(value) == 0:
            return Failure(message)
        return None

    return validate


def contains(fragment: str, message: Optional[str] = None) -> Validator[str]:
    """Require ``fragment`` to occur in the value."""
    message = message or f"value must contain '{fragment}'"

    def validate(value: str) -> Optional[Failure]:
        return None if fragment in value else Failure(message)

    return validate


def min_length(length: int, message: Optional[str] = None) -> Validator[Any]:
    """Require ``len(value) >= length``."""
    message = message or f"value must be at least {length} characters long"

    def validate(value: Any) -> Optional[Failure]:
        return None if len(value) >= length else Failure(message)

    return validate


def max_length(length: int, message: Optional[str] = None) -> Validator[Any]:
    """Require ``len(value) <= length``."""
    message = message or f"value must be at most {length} characters long"

    def validate(value: Any) -> Optional[Failure]:
        return None if len(value) <= length else Failure(message)

    return validate


def matches(
    pattern: Union[str, re.Pattern[str]],
    message: Optional[str] = None,
) -> Validator[str]:
    """
    Require the whole value to match ``pattern``.

    Args:
        pattern: Regular expression, compiled or as a string
        message: Failure message override

    Returns:
        Validator using ``re.fullmatch`` semantics
    """
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
    message = message or f"value must match pattern {compiled.pattern!r}"

    def validate(value: str) -> Optional[Failure]:
        return None if compiled.fullmatch(value) else Failure(message)

    return validate


def in_range(
    minimum: Optional[Any] = None,
    maximum: Optional[Any] = None,
    message: Optional[str] = None,
) -> Validator[Any]:
    """
    Require ``minimum <= value <= maximum``.

    Either bound may be omitted.

    Raises:
        ValueError: If both bounds are given and ``minimum > maximum``
    """
    if minimum is not None and maximum is not None and minimum > maximum:
        raise ValueError(f"minimum ({minimum}) cannot exceed maximum ({maximum})")

    if message is None:
        if minimum is not None and maximum is not None:
            message = f"value must be between {minimum} and {maximum}"
        elif minimum is not None:
            message = f"value must be at least {minimum}"
        elif maximum is not None:
            message = f"value must be at most {maximum}"
        else:
            message = "value is out of range"

    def validate(value: Any) -> Optional[Failure]:
        if minimum is not None and value < minimum:
            return Failure(message)
        if maximum is not None and value > maximum:
            return Failure(message)
        return None

    return validate


def predicate(check: Callable[[Any], bool], message: str) -> Validator[Any]:
    """Turn a boolean ``check`` into a validator failing with ``message``."""

    def validate(value: Any) -> Optional[Failure]:
        return None if check(value) else Failure(message)

    return validate

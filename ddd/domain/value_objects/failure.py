"""Validation failure value."""

from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class Failure:
    """
    Immutable description of why a value failed a validation rule.

    Failures are data, not exceptions: validators return them and value
    objects collect them. Two failures with the same message are
    interchangeable, whatever their concrete subclass.

    Example:
        class EmptyNameFailure(Failure):
            def __init__(self):
                super().__init__("name must not be empty")
    """

    message: str

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Failure):
            return False
        return self.message == other.message

    def __hash__(self) -> int:
        return hash(self.message)

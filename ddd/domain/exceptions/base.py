"""Base domain exception classes.

Every toolkit error derives from ``DomainException`` so applications can
catch toolkit and domain failures in one place. Validation outcomes are not
exceptions; they are reported as ``Failure`` data by value objects.
"""

__all__ = ["DomainException"]


class DomainException(Exception):
    """
    Base exception for all domain-related errors.

    Attributes:
        message: Human-readable description
        code: Stable machine-readable identifier, defaults to the class name
    """

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, code={self.code!r})"

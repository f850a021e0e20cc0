"""Specification contract and combinators."""

from typing import Generic, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class Specification(Protocol[T_contra]):
    """
    Business rule that a candidate either satisfies or not.

    Specifications can be combined with ``all_of``, ``any_of`` and
    ``negate`` to build larger rules from small, testable ones.

    Example:
        class IsActive:
            def is_satisfied_by(self, candidate: User) -> bool:
                return candidate.is_active
    """

    def is_satisfied_by(self, candidate: T_contra) -> bool:
        """Check if ``candidate`` meets the rule."""
        ...


class AndSpecification(Generic[T]):
    """Satisfied when every wrapped specification is."""

    def __init__(self, *specifications: Specification[T]):
        if not specifications:
            raise ValueError("AndSpecification requires at least one specification")
        self.specifications = specifications

    def is_satisfied_by(self, candidate: T) -> bool:
        return all(spec.is_satisfied_by(candidate) for spec in self.specifications)


class OrSpecification(Generic[T]):
    """Satisfied when at least one wrapped specification is."""

    def __init__(self, *specifications: Specification[T]):
        if not specifications:
            raise ValueError("OrSpecification requires at least one specification")
        self.specifications = specifications

    def is_satisfied_by(self, candidate: T) -> bool:
        return any(spec.is_satisfied_by(candidate) for spec in self.specifications)


class NotSpecification(Generic[T]):
    """Satisfied when the wrapped specification is not."""

    def __init__(self, specification: Specification[T]):
        self.specification = specification

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self.specification.is_satisfied_by(candidate)


def all_of(*specifications: Specification[T]) -> AndSpecification[T]:
    return AndSpecification(*specifications)


def any_of(*specifications: Specification[T]) -> OrSpecification[T]:
    return OrSpecification(*specifications)


def negate(specification: Specification[T]) -> NotSpecification[T]:
    return NotSpecification(specification)

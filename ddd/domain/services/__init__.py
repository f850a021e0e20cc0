"""Domain services package."""

from ddd.domain.services.service import DomainService
from ddd.domain.services.specification import (
    AndSpecification,
    NotSpecification,
    OrSpecification,
    Specification,
    all_of,
    any_of,
    negate,
)

__all__ = [
    "AndSpecification",
    "DomainService",
    "NotSpecification",
    "OrSpecification",
    "Specification",
    "all_of",
    "any_of",
    "negate",
]

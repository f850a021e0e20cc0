"""Domain service contract."""

from typing import Protocol


class DomainService(Protocol):
    """
    Marker for domain logic that does not belong to a single entity.

    Domain services are stateless operations over several entities or
    value objects. Any class can act as one; the protocol exists to name
    the role in type hints.
    """

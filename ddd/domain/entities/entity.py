"""Entity contract."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Entity(Protocol):
    """
    Domain object defined by its identity rather than its attributes.

    Entities may change their attributes over time but stay uniquely
    identifiable through ``id``. Application entities satisfy this protocol
    structurally; they do not need to inherit from it.

    Example:
        @dataclass
        class User:
            id: UUID
            full_name: str
    """

    id: Any

"""Domain layer package.

The domain layer contains pure business abstractions with no dependency on
persistence or wiring: value objects, entity and aggregate contracts,
domain events, specifications and domain exceptions.
"""

__all__ = []

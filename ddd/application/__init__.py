"""Application layer package.

Holds the contracts the application core depends on: data transfer
objects and outbound ports implemented by infrastructure adapters.
"""

__all__ = []

"""Infrastructure layer package.

Concrete, in-process implementations of toolkit services.
"""

__all__ = []

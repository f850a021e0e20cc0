"""Data Transfer Objects package."""

from ddd.application.dto.base import DTO

__all__ = [
    "DTO",
]

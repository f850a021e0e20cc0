"""Outbound ports (driven adapters interfaces)."""

from ddd.application.ports.outbound.mapper_port import MapperPort
from ddd.application.ports.outbound.repository_port import RepositoryPort
from ddd.application.ports.outbound.unit_of_work_port import UnitOfWorkPort

__all__ = [
    "MapperPort",
    "RepositoryPort",
    "UnitOfWorkPort",
]

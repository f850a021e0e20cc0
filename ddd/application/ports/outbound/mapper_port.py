"""Mapper port interface."""

from typing import Protocol, TypeVar

EntityT = TypeVar("EntityT")
DtoT = TypeVar("DtoT")


class MapperPort(Protocol[EntityT, DtoT]):
    """
    Bidirectional conversion between a domain entity and another shape.

    The other side is usually a DTO or a persistence model. Mappers are
    stateless; implementations commonly use static methods.

    Example:
        class UserMapper:
            @staticmethod
            def to_dto(entity: User) -> UserOutput:
                return UserOutput.model_validate(entity)

            @staticmethod
            def from_dto(dto: UserOutput) -> User:
                return User(id=dto.id, username=dto.username)
    """

    def to_dto(self, entity: EntityT) -> DtoT:
        """Convert a domain entity to its transfer representation."""
        ...

    def from_dto(self, dto: DtoT) -> EntityT:
        """Convert a transfer representation back to a domain entity."""
        ...

"""DTO (Data Transfer Object) base."""

from pydantic import BaseModel


class DTO(BaseModel):
    """
    Base class for data transfer objects.

    DTOs carry data across layer boundaries without behavior. They are
    frozen and can be built from attribute-bearing objects such as
    entities.

    Example:
        class UserOutput(DTO):
            id: UUID
            username: str

        UserOutput.model_validate(user)
    """

    model_config = {"frozen": True, "from_attributes": True}

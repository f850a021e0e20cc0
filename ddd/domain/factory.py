"""Factory contract."""

from typing import Any, Protocol, TypeVar

T_co = TypeVar("T_co", covariant=True)


class FactoryPort(Protocol[T_co]):
    """
    Creates fully initialised aggregates or entities.

    Factories keep complex construction out of the aggregate itself and
    guarantee that new instances satisfy their invariants.

    Example:
        class OrderFactory:
            def create(self, customer_id: UUID) -> Order:
                return Order(id=uuid4(), customer_id=customer_id, items=[])
    """

    def create(self, *args: Any, **kwargs: Any) -> T_co:
        """
        Build a new instance.

        Returns:
            Newly created aggregate or entity
        """
        ...

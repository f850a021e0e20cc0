"""Unit of Work port interface."""

from typing import Protocol


class UnitOfWorkPort(Protocol):
    """
    Unit of Work interface for managing transactions.

    The Unit of Work pattern maintains a list of objects affected by a business
    transaction and coordinates the writing out of changes. It ensures that all
    repository operations within a transaction are committed or rolled back together.

    Implementations expose their repositories as attributes.

    Usage:
        async with uow:
            order = await uow.orders.get_by_id(order_id)
            order.place()
            await uow.orders.update(order)
            await uow.commit()

        # On exception, automatic rollback occurs
    """

    async def __aenter__(self) -> "UnitOfWorkPort":
        """
        Enter async context manager (begin transaction).

        Returns:
            Self (UnitOfWorkPort instance)
        """
        ...

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """
        Exit context manager (commit or rollback).

        If an exception occurred, the transaction is rolled back.
        Otherwise, the transaction is committed.

        Args:
            exc_type: Exception type if exception occurred
            exc_val: Exception value if exception occurred
            exc_tb: Exception traceback if exception occurred
        """
        ...

    async def commit(self) -> None:
        """
        Commit the current transaction.

        All changes made through repositories will be persisted.
        """
        ...

    async def rollback(self) -> None:
        """
        Rollback the current transaction.

        All changes made through repositories will be discarded.
        """
        ...

"""Port interface for guest message persistence."""

from abc import ABC, abstractmethod
from typing import Any


class GuestMessageRepository(ABC):
    @abstractmethod
    def storable_fields(self, fields: dict[str, Any]) -> dict[str, Any]:
        """Return the subset of *fields* the store has columns for."""
        ...

    @abstractmethod
    async def patch(self, message_id: str, fields: dict[str, Any]) -> int:
        """Apply *fields* to the message keyed by *message_id*.

        Returns the number of rows updated. Raises StoreError on failure.
        """
        ...

    @abstractmethod
    async def commit(self) -> None:
        ...

    @abstractmethod
    async def rollback(self) -> None:
        ...

"""Port interface for the Q&A reference store."""

from abc import ABC, abstractmethod

from app.domain.entities.analysis import QAPair


class QARepository(ABC):
    @abstractmethod
    async def list_active(self, subject_id: str) -> list[QAPair]:
        """Return active Q&A pairs for a subject. Raises StoreError on failure."""
        ...

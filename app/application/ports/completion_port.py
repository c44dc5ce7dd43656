"""Port interface for the external text-completion service."""

from abc import ABC, abstractmethod


class CompletionPort(ABC):
    @abstractmethod
    def is_configured(self) -> bool:
        """Return True if a credential for the service is available."""
        ...

    @abstractmethod
    async def complete(
        self,
        system_instruction: str,
        user_prompt: str,
        max_tokens: int,
        temperature: float,
    ) -> str:
        """Return the first completion's text, or "" if the service gave none.

        Raises UpstreamError when the service answers with a non-success
        status or cannot be reached.
        """
        ...

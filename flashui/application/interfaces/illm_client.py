"""Interface for Language Model client implementations."""

from abc import ABC, abstractmethod
from typing import Any, AsyncIterator

from flashui.domain.models import Model


class ILLMClient(ABC):
    """Interface for LLM clients used by the generation pipeline."""

    def __init__(self, model: Model):
        self.model = model
        self.last_usage = None

    @abstractmethod
    async def generate_once(self, prompt: str, **kwargs: Any) -> str:
        """Send a single request and return the complete response text.

        Args:
            prompt: The full prompt text
            **kwargs: Additional arguments for the LLM (e.g. temperature)

        Returns:
            The response text
        """
        pass

    @abstractmethod
    def generate_stream(self, prompt: str, **kwargs: Any) -> AsyncIterator[str]:
        """Send a single request and yield the response as ordered fragments.

        The full response is the concatenation of all fragments. Network
        errors surface as exceptions raised while iterating.

        Args:
            prompt: The full prompt text
            **kwargs: Additional arguments for the LLM (e.g. temperature)

        Returns:
            Async iterator over text fragments
        """
        pass

"""Abstract LLM provider interface.

All completion backends must inherit from this class.
Business logic never imports a concrete provider directly.
The concrete provider is instantiated once in the FastAPI lifespan
and injected everywhere via Depends().
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class LLMResponse:
    """Structured response from a completion call."""

    text: str


class LLMProvider(ABC):
    """Abstract base class for LLM providers."""

    @abstractmethod
    async def generate(self, prompt: str, system_prompt: str) -> LLMResponse:
        """Generate a complete response from the LLM.

        Args:
            prompt: The user/input prompt text.
            system_prompt: System-level instructions for the model.

        Returns:
            LLMResponse with the text content.

        Raises:
            CopilotAPIError: If the upstream call fails or returns an
                unusable payload.
        """
        ...

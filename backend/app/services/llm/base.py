"""
Abstract base class for all LLM providers.

Each provider implements the API-specific translation layer.
Prompt construction and completion parsing are handled by the chat pipeline.
"""

from abc import ABC, abstractmethod


class LLMProvider(ABC):
    """Abstract base class for all LLM providers."""

    provider_name: str = "base"

    @abstractmethod
    async def chat(
        self,
        system_prompt: str,
        messages: list[dict],
        model: str,
        max_output_tokens: int = 1024,
        temperature: float = 0.3,
    ) -> str:
        """
        Text-only chat completion.

        Args:
            system_prompt: The system prompt, sent first
            messages: List of message dicts with "role" and "content"
            model: The API model identifier
            max_output_tokens: Maximum tokens in the response
            temperature: Sampling temperature

        Returns:
            Raw text response from the LLM

        Raises:
            ValueError: If the provider returned an empty completion
        """
        ...

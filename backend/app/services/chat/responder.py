"""
Response Generator

Second stage of a chat turn: answer the user with the context block as the
system instruction and the full conversation history.
"""

from app.services.chat.models import ConversationTurn
from app.services.chat.prompts import build_responder_prompt
from app.services.llm.base import LLMProvider


class ResponseGenerator:
    def __init__(self, provider: LLMProvider, model: str, max_output_tokens: int = 1024):
        self.provider = provider
        self.model = model
        self.max_output_tokens = max_output_tokens

    async def generate(
        self,
        context: str,
        history: list[ConversationTurn],
        message: str,
    ) -> str:
        """Return the model's reply verbatim."""
        messages = [turn.model_dump() for turn in history]
        messages.append({"role": "user", "content": message})

        return await self.provider.chat(
            system_prompt=build_responder_prompt(context),
            messages=messages,
            model=self.model,
            max_output_tokens=self.max_output_tokens,
            temperature=0.3,
        )

"""
Chat Pipeline

One chat turn:
1. Title selection  - the model sees only material titles and names the relevant ones
2. Context assembly - new materials are merged into the caller's used materials
3. Response         - the model answers with every used material as context

The server keeps no session. History and used materials come in with the
request and the updated used materials go back out with the reply.
"""

import logging
from collections.abc import Callable

from app.core.config import get_settings
from app.services.chat.context import merge_used_materials, render_context
from app.services.chat.models import ChatTurnResult, ConversationTurn, MaterialData
from app.services.chat.responder import ResponseGenerator
from app.services.chat.title_selector import TitleSelector
from app.services.llm.base import LLMProvider
from app.services.llm.registry import get_provider

logger = logging.getLogger(__name__)

ProviderFactory = Callable[[str], tuple[LLMProvider, str]]


class ChatPipeline:
    """Runs the select-then-answer protocol for a single turn."""

    def __init__(self, provider_factory: ProviderFactory = get_provider):
        self.provider_factory = provider_factory
        self.settings = get_settings()

    def resolve_models(self, model_id: str | None = None) -> tuple[str, str]:
        """Return (selector model id, responder model id) for a request."""
        base = model_id or self.settings.default_model
        return (
            self.settings.selector_model or base,
            self.settings.responder_model or base,
        )

    async def run_turn(
        self,
        message: str,
        history: list[ConversationTurn],
        materials: list[MaterialData],
        used_materials: list[MaterialData],
        model_id: str | None = None,
    ) -> ChatTurnResult:
        """
        Process one user message.

        Args:
            message: The new user message
            history: Prior turns, oldest first (not modified)
            materials: Every available material
            used_materials: Materials already surfaced in this conversation (not modified)
            model_id: Optional registry id overriding the configured default

        Returns:
            ChatTurnResult with the reply and the used materials to carry forward
        """
        selector_model, responder_model = self.resolve_models(model_id)

        provider, api_model = self.provider_factory(selector_model)
        selector = TitleSelector(
            provider, api_model, history_turns=self.settings.selector_history_turns
        )
        selected_titles = await selector.select(
            message, [m.title for m in materials], history
        )

        used_after, added = merge_used_materials(used_materials, selected_titles, materials)
        if added:
            logger.info("Adding %d new material(s): %s", len(added), [m.title for m in added])

        context = render_context(used_after)

        provider, api_model = self.provider_factory(responder_model)
        responder = ResponseGenerator(provider, api_model)
        response = await responder.generate(context, history, message)

        return ChatTurnResult(
            response=response,
            used_materials=used_after,
            selected_titles=selected_titles,
            new_titles=[m.title for m in added],
        )


# ── Singleton ─────────────────────────────────────────────────────────────────

_pipeline: ChatPipeline | None = None


def get_chat_pipeline() -> ChatPipeline:
    """Get or create the chat pipeline singleton."""
    global _pipeline
    if _pipeline is None:
        _pipeline = ChatPipeline()
    return _pipeline

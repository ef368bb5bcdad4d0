"""
LLM Provider Abstraction Layer

Provides a unified chat interface over OpenAI and Cloudflare Workers AI
with a model registry.
"""

from app.services.llm.base import LLMProvider
from app.services.llm.registry import MODEL_REGISTRY, get_provider, is_known_model, list_models

__all__ = [
    "LLMProvider",
    "MODEL_REGISTRY",
    "get_provider",
    "is_known_model",
    "list_models",
]

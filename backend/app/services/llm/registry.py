"""
Model Registry

Maps model IDs to their metadata and provider types.
Used by the chat pipeline to select the correct provider per stage.
"""

from app.services.llm.base import LLMProvider


# ── Model Registry ────────────────────────────────────────────────────────────
# Each entry maps a user-facing model_id to:
#   - display_name: Human-readable name for the frontend
#   - provider:     Which LLMProvider class to use
#   - api_model:    The actual model string sent to the provider API
#   - tier:         Pricing tier for frontend display

MODEL_REGISTRY: dict[str, dict] = {
    # ── OpenAI Responses API (GPT-5.x) ──
    "gpt-5-mini": {
        "display_name": "GPT-5 Mini",
        "provider": "openai_responses",
        "api_model": "gpt-5-mini",
        "tier": "standard",
        "description": "Strong reasoning over long course materials. Slower than the GPT-4o family.",
    },
    # ── OpenAI Chat Completions API (GPT-4o) ──
    "gpt-4o": {
        "display_name": "GPT-4o",
        "provider": "openai_chat",
        "api_model": "gpt-4o",
        "tier": "standard",
        "description": "Fast and reliable. Follows the title selection format closely.",
    },
    "gpt-4o-mini": {
        "display_name": "GPT-4o Mini (Budget)",
        "provider": "openai_chat",
        "api_model": "gpt-4o-mini",
        "tier": "budget",
        "description": "Fastest and cheapest. Recommended default.",
    },
    # ── Cloudflare Workers AI ──
    "llama-2-7b-chat": {
        "display_name": "Llama 2 7B Chat (Workers AI)",
        "provider": "workers_ai",
        "api_model": "@cf/meta/llama-2-7b-chat-int8",
        "tier": "budget",
        "description": "Open model hosted on Cloudflare. Needs Cloudflare credentials.",
    },
    "llama-3.1-8b-instruct": {
        "display_name": "Llama 3.1 8B Instruct (Workers AI)",
        "provider": "workers_ai",
        "api_model": "@cf/meta/llama-3.1-8b-instruct",
        "tier": "budget",
        "description": "Newer open model hosted on Cloudflare. Needs Cloudflare credentials.",
    },
}


# ── Provider Factory ──────────────────────────────────────────────────────────

# Provider class registry (lazy-loaded singletons)
_provider_instances: dict[str, LLMProvider] = {}


def _create_provider(provider_type: str) -> LLMProvider:
    """Create a provider instance by type string."""
    if provider_type == "openai_responses":
        from app.services.llm.openai_responses import OpenAIResponsesProvider
        return OpenAIResponsesProvider()
    elif provider_type == "openai_chat":
        from app.services.llm.openai_chat import OpenAIChatProvider
        return OpenAIChatProvider()
    elif provider_type == "workers_ai":
        from app.services.llm.workers_ai import WorkersAIProvider
        return WorkersAIProvider()
    else:
        raise ValueError(f"Unknown provider type: {provider_type}")


def is_known_model(model_id: str) -> bool:
    return model_id in MODEL_REGISTRY


def get_provider(model_id: str) -> tuple[LLMProvider, str]:
    """
    Get the provider instance and API model name for a given model_id.

    Args:
        model_id: The user-facing model identifier (e.g., "gpt-4o")

    Returns:
        Tuple of (provider_instance, api_model_name)

    Raises:
        ValueError: If the model_id is not in the registry
    """
    if model_id not in MODEL_REGISTRY:
        raise ValueError(
            f"Unknown model: {model_id}. "
            f"Available models: {', '.join(MODEL_REGISTRY.keys())}"
        )

    model_info = MODEL_REGISTRY[model_id]
    provider_type = model_info["provider"]

    # Lazy singleton creation
    if provider_type not in _provider_instances:
        _provider_instances[provider_type] = _create_provider(provider_type)

    return _provider_instances[provider_type], model_info["api_model"]


def list_models() -> list[dict]:
    """
    Return the list of available models for the frontend.

    Returns:
        List of dicts with id, display_name, provider, tier, description
    """
    return [
        {
            "id": model_id,
            "display_name": info["display_name"],
            "provider": info["provider"],
            "tier": info["tier"],
            "description": info.get("description", ""),
        }
        for model_id, info in MODEL_REGISTRY.items()
    ]

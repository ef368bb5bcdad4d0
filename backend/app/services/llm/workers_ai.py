"""
Cloudflare Workers AI Provider

Runs open models (Llama and friends) hosted on Cloudflare through the
Workers AI REST endpoint:
- POST https://api.cloudflare.com/client/v4/accounts/{account_id}/ai/run/{model}
- body {"messages": [...], "stream": false}
- response {"success": true, "result": {"response": "..."}}
"""

import httpx

from app.core.config import get_settings
from app.services.llm.base import LLMProvider

settings = get_settings()

WORKERS_AI_BASE_URL = "https://api.cloudflare.com/client/v4/accounts"


class WorkersAIProvider(LLMProvider):
    """Provider for Cloudflare Workers AI text-generation models."""

    provider_name = "workers_ai"

    def __init__(self, timeout: float = 60.0, transport: httpx.AsyncBaseTransport | None = None):
        self.account_id = settings.cloudflare_account_id
        self.api_token = settings.cloudflare_api_token
        self.timeout = timeout
        self.transport = transport

    def _run_url(self, model: str) -> str:
        return f"{WORKERS_AI_BASE_URL}/{self.account_id}/ai/run/{model}"

    async def chat(
        self,
        system_prompt: str,
        messages: list[dict],
        model: str,
        max_output_tokens: int = 1024,
        temperature: float = 0.3,
    ) -> str:
        if not self.account_id or not self.api_token:
            raise ValueError("Cloudflare account id and API token must be configured for Workers AI")

        payload = {
            "messages": [{"role": "system", "content": system_prompt}] + messages,
            "stream": False,
            "max_tokens": max_output_tokens,
            "temperature": temperature,
        }

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.post(
                self._run_url(model),
                headers={"Authorization": f"Bearer {self.api_token}"},
                json=payload,
            )
            response.raise_for_status()
            data = response.json()

        if not data.get("success", True):
            errors = "; ".join(e.get("message", "") for e in data.get("errors", []))
            raise ValueError(f"Workers AI request failed: {errors or 'unknown error'}")

        content = (data.get("result") or {}).get("response")
        if not content:
            raise ValueError("Empty response from Workers AI")
        return content

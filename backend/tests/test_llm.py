"""
Tests for the model registry and the Workers AI provider.
"""

import json

import httpx
import pytest

from app.services.llm.registry import get_provider, is_known_model, list_models
from app.services.llm.workers_ai import WorkersAIProvider


class TestRegistry:
    def test_unknown_model(self):
        assert not is_known_model("gpt-2")
        with pytest.raises(ValueError, match="Unknown model"):
            get_provider("gpt-2")

    def test_workers_ai_model(self):
        provider, api_model = get_provider("llama-2-7b-chat")

        assert provider.provider_name == "workers_ai"
        assert api_model == "@cf/meta/llama-2-7b-chat-int8"

    def test_providers_are_shared(self):
        first, _ = get_provider("gpt-4o")
        second, _ = get_provider("gpt-4o-mini")

        assert first is second

    def test_list_models(self):
        models = list_models()

        assert {m["id"] for m in models} >= {"gpt-4o", "gpt-4o-mini", "llama-2-7b-chat"}
        assert all(m["provider"] for m in models)


class TestWorkersAIProvider:
    @staticmethod
    def make_provider(handler) -> WorkersAIProvider:
        provider = WorkersAIProvider(transport=httpx.MockTransport(handler))
        provider.account_id = "acct"
        provider.api_token = "token"
        return provider

    @pytest.mark.asyncio
    async def test_chat(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["auth"] = request.headers["authorization"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"success": True, "result": {"response": "selected titles: lab1"}})

        provider = self.make_provider(handler)
        content = await provider.chat(
            system_prompt="pick titles",
            messages=[{"role": "user", "content": "lab1?"}],
            model="@cf/meta/llama-2-7b-chat-int8",
        )

        assert content == "selected titles: lab1"
        assert seen["url"].endswith("/accounts/acct/ai/run/@cf/meta/llama-2-7b-chat-int8")
        assert seen["auth"] == "Bearer token"
        assert seen["body"]["stream"] is False
        assert seen["body"]["messages"][0] == {"role": "system", "content": "pick titles"}

    @pytest.mark.asyncio
    async def test_empty_response(self):
        provider = self.make_provider(
            lambda request: httpx.Response(200, json={"success": True, "result": {"response": ""}})
        )

        with pytest.raises(ValueError, match="Empty response"):
            await provider.chat("s", [{"role": "user", "content": "hi"}], "@cf/model")

    @pytest.mark.asyncio
    async def test_http_error(self):
        provider = self.make_provider(lambda request: httpx.Response(401, json={"success": False}))

        with pytest.raises(httpx.HTTPStatusError):
            await provider.chat("s", [{"role": "user", "content": "hi"}], "@cf/model")

    @pytest.mark.asyncio
    async def test_missing_credentials(self):
        provider = WorkersAIProvider()
        provider.account_id = ""

        with pytest.raises(ValueError, match="Cloudflare"):
            await provider.chat("s", [{"role": "user", "content": "hi"}], "@cf/model")

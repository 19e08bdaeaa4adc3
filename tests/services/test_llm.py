"""Tests for the Anthropic wrapper."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import anthropic
import httpx
import pytest

from flightops.persistence.errors import ConfigurationError
from flightops.services.errors import ProviderError
from flightops.services.llm import LanguageModel, extract_json


def _client(*texts: str) -> MagicMock:
    client = MagicMock()
    client.messages.create = AsyncMock(
        return_value=SimpleNamespace(content=[SimpleNamespace(type="text", text=t) for t in texts])
    )
    return client


class TestExtractJson:
    def test_plain(self):
        assert extract_json('{"a": 1}') == {"a": 1}

    def test_fenced(self):
        assert extract_json('Here you go:\n```json\n{"a": 1}\n```') == {"a": 1}

    def test_no_object(self):
        with pytest.raises(ProviderError):
            extract_json("Sorry, I cannot help")

    def test_invalid(self):
        with pytest.raises(ProviderError):
            extract_json("{not json}")


class TestLanguageModel:
    async def test_complete_joins_text_blocks(self):
        client = _client("Hello ", "world")
        llm = LanguageModel(api_key="k", model="test-model", client=client)

        assert await llm.complete("Say hi", system="Be brief") == "Hello world"
        kwargs = client.messages.create.call_args.kwargs
        assert kwargs["model"] == "test-model"
        assert kwargs["system"] == "Be brief"
        assert kwargs["messages"] == [{"role": "user", "content": "Say hi"}]

    async def test_complete_json(self):
        llm = LanguageModel(api_key="k", client=_client('{"ok": true}'))
        assert await llm.complete_json("Reply") == {"ok": True}

    async def test_api_error_becomes_provider_error(self):
        client = MagicMock()
        request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
        client.messages.create = AsyncMock(side_effect=anthropic.APIConnectionError(request=request))
        llm = LanguageModel(api_key="k", client=client)

        with pytest.raises(ProviderError):
            await llm.complete("Say hi")

    async def test_missing_key(self, monkeypatch):
        monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
        with pytest.raises(ConfigurationError):
            await LanguageModel().complete("Say hi")

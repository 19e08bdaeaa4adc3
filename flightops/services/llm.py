"""Language-model client used for text generation and structured suggestions.

Wraps the Anthropic Messages API. Provider failures surface as
``ProviderError``; nothing is retried.
"""

from __future__ import annotations

import json
import logging
import os
import re
from typing import Any

import anthropic

from flightops.persistence.errors import ConfigurationError
from flightops.services.errors import ProviderError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-sonnet-4-20250514"

_JSON_FENCE = re.compile(r"```(?:json)?\s*(.*?)```", re.DOTALL)


def _clean_text(text: str) -> str:
    """Remove BOM characters and surrounding whitespace."""
    if not text:
        return ""
    return text.replace("\ufeff", "").replace("\ufffe", "").strip()


def extract_json(text: str) -> dict[str, Any]:
    """Parse the JSON object in a model reply, with or without a code fence."""
    fenced = _JSON_FENCE.search(text)
    candidate = fenced.group(1) if fenced else text
    start, end = candidate.find("{"), candidate.rfind("}")
    if start == -1 or end < start:
        raise ProviderError("Language model reply contains no JSON object")
    try:
        return json.loads(candidate[start:end + 1])
    except json.JSONDecodeError as exc:
        raise ProviderError(f"Language model returned invalid JSON: {exc}") from exc


class LanguageModel:
    """Thin async wrapper over ``anthropic.AsyncAnthropic``."""

    def __init__(self, api_key: str | None = None, model: str | None = None, client: Any = None):
        self.api_key = api_key or os.getenv("ANTHROPIC_API_KEY", "")
        self.model = model or os.getenv("FLIGHTOPS_LLM_MODEL", DEFAULT_MODEL)
        self._client = client

    def _get_client(self):
        """Lazy initialization of the Anthropic client."""
        if self._client is None:
            if not self.api_key:
                raise ConfigurationError("No Anthropic API key configured")
            self._client = anthropic.AsyncAnthropic(api_key=self.api_key)
        return self._client

    async def complete(self, prompt: str, system: str | None = None, max_tokens: int = 1500) -> str:
        """Send *prompt* and return the reply text verbatim."""
        client = self._get_client()
        kwargs: dict[str, Any] = {
            "model": self.model,
            "max_tokens": max_tokens,
            "messages": [{"role": "user", "content": _clean_text(prompt)}],
        }
        if system:
            kwargs["system"] = _clean_text(system)

        try:
            message = await client.messages.create(**kwargs)
        except anthropic.APIError as exc:
            logger.error("Language model call failed: %s", exc)
            raise ProviderError(f"Language model call failed: {exc}") from exc

        text = "".join(
            block.text for block in message.content if getattr(block, "type", "text") == "text"
        )
        logger.info("Language model reply received (%d chars)", len(text))
        return text

    async def complete_json(
        self, prompt: str, system: str | None = None, max_tokens: int = 1500
    ) -> dict[str, Any]:
        """Like ``complete`` but the reply must be a single JSON object."""
        return extract_json(await self.complete(prompt, system=system, max_tokens=max_tokens))

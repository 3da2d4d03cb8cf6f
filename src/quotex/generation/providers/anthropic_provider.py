from __future__ import annotations

import logging
from typing import Optional

import requests

from quotex.core.errors import ProviderError
from quotex.generation.providers.helpers.http import post_json
from quotex.utils.settings import settings

logger = logging.getLogger(__name__)


class ClaudeProvider:
    """Anthropic messages API (POST /v1/messages, x-api-key + anthropic-version headers)."""

    key = "claude"
    label = "Claude"

    def __init__(
            self,
            base_url: Optional[str] = None,
            model: Optional[str] = None,
            max_tokens: Optional[int] = None,
            anthropic_version: Optional[str] = None,
            timeout: Optional[float] = None,
            session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or settings.claude.base_url).rstrip('/')
        self.model = model or settings.claude.model
        self.max_tokens = max_tokens or settings.claude.max_tokens
        self.anthropic_version = anthropic_version or settings.claude.anthropic_version
        self.timeout = timeout if timeout is not None else settings.http.timeout_s
        self.session = session or requests.Session()

        logger.info(f"ClaudeProvider: {self.base_url}, model: {self.model}")

    def complete(self, credential: str, system_prompt: str, user_message: str) -> str:
        """Send the system prompt as the top-level `system` field and return content[0].text."""
        data = post_json(
            self.session,
            f"{self.base_url}/v1/messages",
            provider=self.key,
            label=self.label,
            headers={
                "x-api-key": credential,
                "anthropic-version": self.anthropic_version,
            },
            payload={
                "model": self.model,
                "max_tokens": self.max_tokens,
                "system": system_prompt,
                "messages": [{"role": "user", "content": user_message}],
            },
            timeout=self.timeout,
        )

        try:
            text = data["content"][0]["text"]
        except (KeyError, IndexError, TypeError) as e:
            logger.error(f"❌ Unexpected Claude response structure: {str(data)[:200]}")
            raise ProviderError("Claude response missing content[0].text", provider=self.key) from e

        return text or ""

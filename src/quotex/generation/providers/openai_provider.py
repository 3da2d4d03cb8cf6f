from __future__ import annotations

import logging
from typing import Optional

import requests

from quotex.core.errors import ProviderError
from quotex.generation.providers.helpers.http import post_json
from quotex.utils.settings import settings

logger = logging.getLogger(__name__)


class OpenAIProvider:
    """OpenAI-compatible chat completions (POST /v1/chat/completions, bearer auth)."""

    key = "openai"
    label = "OpenAI"

    def __init__(
            self,
            base_url: Optional[str] = None,
            model: Optional[str] = None,
            max_tokens: Optional[int] = None,
            timeout: Optional[float] = None,
            session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or settings.openai.base_url).rstrip('/')
        self.model = model or settings.openai.model
        self.max_tokens = max_tokens or settings.openai.max_tokens
        self.timeout = timeout if timeout is not None else settings.http.timeout_s
        self.session = session or requests.Session()

        logger.info(f"OpenAIProvider: {self.base_url}, model: {self.model}")

    def complete(self, credential: str, system_prompt: str, user_message: str) -> str:
        """Send one system+user exchange and return choices[0].message.content."""
        data = post_json(
            self.session,
            f"{self.base_url}/v1/chat/completions",
            provider=self.key,
            label=self.label,
            headers={"Authorization": f"Bearer {credential}"},
            payload={
                "model": self.model,
                "max_tokens": self.max_tokens,
                "messages": [
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_message},
                ],
            },
            timeout=self.timeout,
        )

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            logger.error(f"❌ Unexpected OpenAI response structure: {str(data)[:200]}")
            raise ProviderError("OpenAI response missing choices[0].message.content", provider=self.key) from e

        return content or ""

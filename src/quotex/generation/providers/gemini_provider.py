from __future__ import annotations

import logging
from typing import Optional

import requests

from quotex.core.errors import ProviderError
from quotex.generation.providers.helpers.http import post_json
from quotex.utils.settings import settings

logger = logging.getLogger(__name__)


class GeminiProvider:
    """Google generateContent (credential passed as the `key` query parameter)."""

    key = "gemini"
    label = "Gemini"

    def __init__(
            self,
            base_url: Optional[str] = None,
            model: Optional[str] = None,
            max_tokens: Optional[int] = None,
            timeout: Optional[float] = None,
            session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or settings.gemini.base_url).rstrip('/')
        self.model = model or settings.gemini.model
        self.max_tokens = max_tokens or settings.gemini.max_tokens
        self.timeout = timeout if timeout is not None else settings.http.timeout_s
        self.session = session or requests.Session()

        logger.info(f"GeminiProvider: {self.base_url}, model: {self.model}")

    def complete(self, credential: str, system_prompt: str, user_message: str) -> str:
        """Gemini has no system role here: both prompts go into one text part."""
        data = post_json(
            self.session,
            f"{self.base_url}/v1beta/models/{self.model}:generateContent",
            provider=self.key,
            label=self.label,
            params={"key": credential},
            payload={
                "contents": [{"parts": [{"text": f"{system_prompt}\n\n{user_message}"}]}],
                "generationConfig": {"maxOutputTokens": self.max_tokens},
            },
            timeout=self.timeout,
        )

        try:
            text = data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError) as e:
            logger.error(f"❌ Unexpected Gemini response structure: {str(data)[:200]}")
            raise ProviderError(
                "Gemini response missing candidates[0].content.parts[0].text", provider=self.key
            ) from e

        return text or ""

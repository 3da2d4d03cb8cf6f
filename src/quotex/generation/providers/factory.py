"""Provider selection: a closed enum mapped to independent strategy objects."""
from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, Optional, Protocol, Union

import requests

from quotex.core.errors import ValidationError
from quotex.generation.providers.anthropic_provider import ClaudeProvider
from quotex.generation.providers.gemini_provider import GeminiProvider
from quotex.generation.providers.openai_provider import OpenAIProvider

logger = logging.getLogger(__name__)


class Provider(str, Enum):
    OPENAI = "openai"
    CLAUDE = "claude"
    GEMINI = "gemini"


PROVIDER_LABELS: Dict[Provider, str] = {
    Provider.OPENAI: "OpenAI (GPT-4o)",
    Provider.CLAUDE: "Claude (Anthropic)",
    Provider.GEMINI: "Gemini (Google)",
}


class ChatProvider(Protocol):
    key: str
    label: str

    def complete(self, credential: str, system_prompt: str, user_message: str) -> str:
        ...


_FACTORIES: Dict[Provider, Callable[..., ChatProvider]] = {
    Provider.OPENAI: OpenAIProvider,
    Provider.CLAUDE: ClaudeProvider,
    Provider.GEMINI: GeminiProvider,
}


def resolve_provider(kind: Union[Provider, str]) -> Provider:
    if isinstance(kind, Provider):
        return kind
    try:
        return Provider(str(kind).strip().lower())
    except ValueError:
        raise ValidationError(
            f"Unknown provider: {kind} (expected one of {[p.value for p in Provider]})"
        ) from None


def get_provider(kind: Union[Provider, str], session: Optional[requests.Session] = None) -> ChatProvider:
    """Build the strategy for one provider. Each call returns a fresh, unshared instance."""
    provider = resolve_provider(kind)
    return _FACTORIES[provider](session=session)


def complete(
        provider: Union[Provider, str],
        credential: str,
        system_prompt: str,
        user_message: str,
        session: Optional[requests.Session] = None,
) -> str:
    """
    Send one prompt pair to the selected provider and return its reply text.

    Raises:
        ValidationError: If the credential is blank or the provider is unknown.
        ProviderError: If the upstream call fails.
    """
    if not credential or not credential.strip():
        raise ValidationError("API key is required")

    strategy = get_provider(provider, session=session)
    logger.info(f"📝 Completing with {strategy.label}: user_message_length={len(user_message)}")
    reply = strategy.complete(credential.strip(), system_prompt, user_message)
    logger.info(f"✅ {strategy.label} replied: response_length={len(reply)}")
    return reply

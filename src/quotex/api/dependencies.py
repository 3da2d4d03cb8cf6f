from __future__ import annotations

import logging
from functools import lru_cache

from quotex.corpus.store import DocumentStore
from quotex.generation.prompts.builder import PromptBuilder
from quotex.generation.prompts.utils.prompt_config import PromptConfig
from quotex.generation.providers.openai_provider import OpenAIProvider
from quotex.utils.settings import settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_document_store() -> DocumentStore:
    """Process-wide relay corpus. Lost on restart."""
    logger.info("Creating relay document store...")
    return DocumentStore()


@lru_cache(maxsize=1)
def get_prompt_builder() -> PromptBuilder:
    """Prompt builder using the relay template set and per-document cap."""
    logger.info("Creating PromptBuilder...")
    return PromptBuilder(PromptConfig(
        doc_char_limit=settings.relay.doc_char_limit,
        template_set="relay",
    ))


@lru_cache(maxsize=1)
def get_relay_provider() -> OpenAIProvider:
    """OpenAI strategy configured with the relay model and token budget."""
    logger.info("Creating relay OpenAI provider...")
    return OpenAIProvider(
        model=settings.relay.model,
        max_tokens=settings.relay.max_tokens,
    )


def get_relay_credential() -> str:
    return settings.relay.api_key

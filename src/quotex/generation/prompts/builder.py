from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, Optional

import yaml

from quotex.core.types import Document
from quotex.generation.prompts.utils.prompt_config import PromptConfig
from quotex.utils.settings import settings

logger = logging.getLogger(__name__)

PROMPTS_PATH = Path(__file__).resolve().parent / "templates" / "quote_prompts.yaml"


@dataclass(frozen=True)
class BuiltPrompt:
    system_prompt: str
    user_message: str


@lru_cache(maxsize=1)
def load_templates(path: Path = PROMPTS_PATH) -> Dict[str, Dict[str, str]]:
    """Load system-instruction templates from YAML, keyed by template set then mode."""
    if not path.exists():
        raise FileNotFoundError(f"Prompts file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        templates = yaml.safe_load(f)

    logger.info(f"Loaded quote prompts from {path}")
    return templates


def build_context(documents: Iterable[Document], doc_char_limit: int) -> str:
    """Join documents as '--- name ---' blocks, in insertion order, each body truncated."""
    return "\n\n".join(
        f"--- {doc.name} ---\n{doc.text[:doc_char_limit]}" for doc in documents
    )


def build_user_message(context: str, question: str) -> str:
    return f"Documents:\n\n{context}\n\nQuestion: {question}"


class PromptBuilder:
    """Builds the (system prompt, user message) pair sent to a provider."""

    def __init__(self, config: Optional[PromptConfig] = None):
        self.config = config or PromptConfig(
            doc_char_limit=settings.prompt.doc_char_limit,
            template_set=settings.prompt.template_set,
        )
        templates = load_templates()
        if self.config.template_set not in templates:
            raise ValueError(
                f"Unknown template set: {self.config.template_set} "
                f"(expected one of {sorted(templates)})"
            )
        self._templates = templates[self.config.template_set]

    def system_prompt(self, strict_quotes_only: bool) -> str:
        return self._templates["strict" if strict_quotes_only else "relaxed"]

    def build(
            self,
            documents: Iterable[Document],
            question: str,
            strict_quotes_only: Optional[bool] = None,
    ) -> BuiltPrompt:
        """
        Build the prompt pair for one query.

        Args:
            documents: Documents in insertion order
            question: The user's question, passed through unchanged
            strict_quotes_only: Overrides the configured mode when given
        """
        strict = self.config.strict_quotes_only if strict_quotes_only is None else strict_quotes_only
        documents = list(documents)
        context = build_context(documents, self.config.doc_char_limit)

        logger.debug(
            f"Built prompt: docs={len(documents)}, context_chars={len(context)}, "
            f"strict={strict}, template_set={self.config.template_set}"
        )

        return BuiltPrompt(
            system_prompt=self.system_prompt(strict),
            user_message=build_user_message(context, question),
        )

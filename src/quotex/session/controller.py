from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, List, Optional, Union

from quotex.core.errors import ProviderError, ValidationError
from quotex.core.types import Document, QueryResult, QuoteCandidate
from quotex.corpus.store import DocumentStore
from quotex.generation.parsing.quotes import parse_response
from quotex.generation.prompts.builder import PromptBuilder
from quotex.generation.providers.factory import Provider, complete, resolve_provider

logger = logging.getLogger(__name__)

Completer = Callable[[Provider, str, str, str], str]


class SessionState(Enum):
    IDLE = "idle"
    LOADING = "loading"


class SessionController:
    """
    Holds one user's corpus, provider choice and last query outcome.

    At most one query runs at a time; the loading state is the only guard.
    Answer and quotes are replaced together, and cleared when a query starts.
    """

    def __init__(
            self,
            store: Optional[DocumentStore] = None,
            prompt_builder: Optional[PromptBuilder] = None,
            completer: Completer = complete,
            provider: Union[Provider, str] = Provider.OPENAI,
            credential: str = "",
            strict_quotes_only: bool = True,
    ):
        self.store = store or DocumentStore()
        self.prompt_builder = prompt_builder or PromptBuilder()
        self._complete = completer
        self.provider = resolve_provider(provider)
        self.credential = credential
        self.strict_quotes_only = strict_quotes_only

        self.state = SessionState.IDLE
        self.answer = ""
        self.quotes: List[QuoteCandidate] = []
        self.error = ""
        self.preferred_quote_id: Optional[str] = None

    @property
    def loading(self) -> bool:
        return self.state is SessionState.LOADING

    @property
    def documents(self) -> List[Document]:
        return self.store.list()

    # Corpus

    def add_document(self, text: str, name: Optional[str] = None) -> Document:
        return self.store.add(text, name)

    def remove_document(self, doc_id: str) -> Optional[Document]:
        return self.store.remove(doc_id)

    def clear_corpus(self) -> None:
        self.store.clear()
        self._reset_result()

    # Provider

    def select_provider(self, provider: Union[Provider, str]) -> None:
        self.provider = resolve_provider(provider)

    def set_credential(self, credential: str) -> None:
        self.credential = credential

    # Query

    def validate_query(self, question: str) -> None:
        """Raise ValidationError when a query may not start."""
        if self.loading:
            raise ValidationError("A query is already running")
        if not question or not question.strip():
            raise ValidationError("Prompt is required")
        if not self.store:
            raise ValidationError("No documents loaded. Please paste your text first.")
        if not self.credential or not self.credential.strip():
            raise ValidationError("API key is required")

    def can_run_query(self, question: str) -> bool:
        try:
            self.validate_query(question)
        except ValidationError:
            return False
        return True

    def run_query(self, question: str) -> Optional[QueryResult]:
        """
        Run one query against the selected provider.

        Returns:
            The parsed result, or None when the provider failed (see `error`).

        Raises:
            ValidationError: Before any network call, when the query cannot start.
        """
        self.validate_query(question)

        self.state = SessionState.LOADING
        self.error = ""
        self._reset_result()

        try:
            prompt = self.prompt_builder.build(
                self.store.list(), question, strict_quotes_only=self.strict_quotes_only
            )
            reply = self._complete(self.provider, self.credential, prompt.system_prompt, prompt.user_message)
            result = parse_response(reply)
        except ProviderError as e:
            logger.error(f"❌ Query failed ({self.provider.value}): {e}")
            self.error = str(e) or "Query failed"
            return None
        finally:
            self.state = SessionState.IDLE

        self.answer = result.answer
        self.quotes = result.quotes
        logger.info(f"✓ Query answered: quotes={len(result.quotes)}")
        return result

    def select_preferred_quote(self, quote_id: str) -> QuoteCandidate:
        for quote in self.quotes:
            if quote.id == quote_id:
                self.preferred_quote_id = quote_id
                return quote
        raise ValidationError(f"Unknown quote id: {quote_id}")

    def _reset_result(self) -> None:
        self.answer = ""
        self.quotes = []
        self.preferred_quote_id = None

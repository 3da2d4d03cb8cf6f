from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from quotex.api.dependencies import (
    get_document_store,
    get_prompt_builder,
    get_relay_credential,
    get_relay_provider,
)
from quotex.api.schemas.query import QueryRequest, QueryResponse
from quotex.core.errors import ProviderError, ValidationError
from quotex.corpus.store import DocumentStore
from quotex.generation.parsing.quotes import parse_response
from quotex.generation.prompts.builder import PromptBuilder
from quotex.generation.providers.factory import ChatProvider

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Query"])

NO_DOCUMENTS_ANSWER = "No documents loaded. Please paste your text first."


@router.post("/query", response_model=QueryResponse)
async def query_documents(
        request: Optional[QueryRequest] = None,
        store: DocumentStore = Depends(get_document_store),
        prompt_builder: PromptBuilder = Depends(get_prompt_builder),
        provider: ChatProvider = Depends(get_relay_provider),
        credential: str = Depends(get_relay_credential),
) -> QueryResponse:
    """
    Answer a question from the relay corpus using the server-held OpenAI key.

    An empty corpus returns a fixed answer without calling the provider.
    """
    request = request or QueryRequest()
    if not request.prompt or not request.prompt.strip():
        raise ValidationError("Prompt is required")

    if not store:
        return QueryResponse(answer=NO_DOCUMENTS_ANSWER, quotes=[])

    if not credential:
        raise ProviderError("Relay OpenAI API key is not configured", provider="openai")

    logger.info(
        f"📝 Relay query: prompt_length={len(request.prompt)}, docs={len(store)}, "
        f"strict={request.strict_quotes_only}"
    )

    prompt = prompt_builder.build(store.list(), request.prompt, strict_quotes_only=request.strict_quotes_only)
    reply = await run_in_threadpool(provider.complete, credential, prompt.system_prompt, prompt.user_message)
    result = parse_response(reply)

    return QueryResponse(
        answer=result.answer,
        quotes=[q.to_dict() for q in result.quotes],
    )

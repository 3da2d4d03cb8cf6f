from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends

from quotex.api.dependencies import get_document_store
from quotex.api.schemas.documents import AddTextRequest, AddTextResponse, DeleteResponse, DocumentInfo
from quotex.corpus.store import DocumentStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Documents"])


@router.post("/text", response_model=AddTextResponse)
async def add_text(
        request: Optional[AddTextRequest] = None,
        store: DocumentStore = Depends(get_document_store),
) -> AddTextResponse:
    """Add a pasted document to the relay corpus. Blank text is a 400."""
    request = request or AddTextRequest()
    doc = store.add(request.text or "", request.name)

    return AddTextResponse(
        document=DocumentInfo(
            id=doc.id,
            name=doc.name,
            size=doc.size,
            uploaded_at=doc.uploaded_at_iso,
        )
    )


@router.delete("/documents", response_model=DeleteResponse)
async def clear_documents(
        store: DocumentStore = Depends(get_document_store),
) -> DeleteResponse:
    """Drop every document held by the relay."""
    store.clear()
    return DeleteResponse()

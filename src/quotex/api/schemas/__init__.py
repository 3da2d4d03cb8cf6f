from __future__ import annotations

from quotex.api.schemas.documents import AddTextRequest, AddTextResponse, DeleteResponse, DocumentInfo
from quotex.api.schemas.health import HealthResponse
from quotex.api.schemas.query import ErrorResponse, QueryRequest, QueryResponse, QuoteInfo

__all__ = [
    # Documents
    "AddTextRequest",
    "AddTextResponse",
    "DeleteResponse",
    "DocumentInfo",
    # Health
    "HealthResponse",
    # Query
    "QueryRequest",
    "QueryResponse",
    "QuoteInfo",
    "ErrorResponse",
]

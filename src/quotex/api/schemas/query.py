from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class QueryRequest(BaseModel):
    """Request model for POST /api/query."""
    model_config = ConfigDict(populate_by_name=True)

    prompt: Optional[str] = Field(None, description="Question to answer from the relay corpus")
    strict_quotes_only: bool = Field(
        True,
        alias="strictQuotesOnly",
        description="Use the strict exact-quote instructions"
    )


class QuoteInfo(BaseModel):
    """Quote candidate as asserted by the model."""
    id: str
    quote: str
    source: str
    page: Optional[int] = None
    score: Optional[float] = None


class QueryResponse(BaseModel):
    success: bool = True
    answer: str
    quotes: List[QuoteInfo]


class ErrorResponse(BaseModel):
    success: bool = False
    error: str

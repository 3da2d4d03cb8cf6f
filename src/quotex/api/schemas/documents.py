from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class AddTextRequest(BaseModel):
    """Request model for POST /api/text. Blank text is rejected by the store, not here."""
    name: Optional[str] = Field(None, description="Document name, defaults to 'Document'")
    text: Optional[str] = Field(None, description="Raw document text")


class DocumentInfo(BaseModel):
    """Document summary returned to clients (body omitted)."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    size: int = Field(..., description="Character count")
    uploaded_at: str = Field(..., alias="uploadedAt", description="ISO-8601 UTC timestamp")


class AddTextResponse(BaseModel):
    success: bool = True
    document: DocumentInfo


class DeleteResponse(BaseModel):
    success: bool = True

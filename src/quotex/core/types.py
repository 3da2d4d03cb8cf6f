"""Core data models for quotex."""
from __future__ import annotations

import time
from dataclasses import dataclass, field, asdict
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

DEFAULT_DOCUMENT_NAME = "Document"


@dataclass(frozen=True)
class Document:
    """A pasted document. Immutable once created."""
    id: str
    name: str
    text: str
    size: int
    uploaded_at: datetime

    @classmethod
    def create(cls, text: str, name: Optional[str] = None) -> Document:
        """Build a document, deriving the id from the creation time."""
        return cls(
            id=str(time.time_ns()),
            name=(name or "").strip() or DEFAULT_DOCUMENT_NAME,
            text=text,
            size=len(text),
            uploaded_at=datetime.now(timezone.utc),
        )

    @property
    def uploaded_at_iso(self) -> str:
        """ISO-8601 UTC with milliseconds and a trailing Z."""
        return self.uploaded_at.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class QuoteCandidate:
    """Quote claimed by the model. page and score are model-asserted and may be missing."""
    id: str
    quote: str = ""
    source: str = ""
    page: Optional[int] = None
    score: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class QueryResult:
    answer: str
    quotes: List[QuoteCandidate] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "answer": self.answer,
            "quotes": [q.to_dict() for q in self.quotes],
        }

from __future__ import annotations

import logging
from typing import Iterator, List, Optional

from quotex.core.errors import ValidationError
from quotex.core.types import Document

logger = logging.getLogger(__name__)


class DocumentStore:
    """In-memory, insertion-ordered document collection. Nothing is persisted."""

    def __init__(self):
        self._documents: List[Document] = []

    def add(self, text: str, name: Optional[str] = None) -> Document:
        """
        Add a pasted document.

        Args:
            text: Raw document body. Must contain non-whitespace characters.
            name: Display name, defaults to "Document" when blank.

        Raises:
            ValidationError: If the text is empty.
        """
        if not text or not text.strip():
            raise ValidationError("No text provided")

        doc = Document.create(text, name)
        # Two adds within the same clock tick would collide on the time-derived id
        while self.get(doc.id) is not None:
            doc = Document(
                id=str(int(doc.id) + 1),
                name=doc.name,
                text=doc.text,
                size=doc.size,
                uploaded_at=doc.uploaded_at,
            )

        self._documents.append(doc)
        logger.info(f"Added: {doc.name} ({doc.size} chars)")
        return doc

    def get(self, doc_id: str) -> Optional[Document]:
        for doc in self._documents:
            if doc.id == doc_id:
                return doc
        return None

    def remove(self, doc_id: str) -> Optional[Document]:
        """Remove a document by id. Returns the removed document, or None if unknown."""
        doc = self.get(doc_id)
        if doc is None:
            logger.warning(f"Remove requested for unknown document id: {doc_id}")
            return None
        self._documents = [d for d in self._documents if d.id != doc_id]
        logger.info(f"Removed: {doc.name}")
        return doc

    def clear(self) -> None:
        count = len(self._documents)
        self._documents = []
        logger.info(f"Cleared corpus ({count} documents)")

    def list(self) -> List[Document]:
        return list(self._documents)

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(list(self._documents))

    def __bool__(self) -> bool:
        return bool(self._documents)

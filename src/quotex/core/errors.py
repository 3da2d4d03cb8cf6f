from __future__ import annotations

from typing import Optional


class QuotexError(Exception):
    """Base class for quotex errors."""


class ValidationError(QuotexError):
    """Input rejected before any network call (empty text, prompt or credential)."""


class ProviderError(QuotexError):
    """Upstream chat API failed or returned an unexpected envelope."""

    def __init__(self, message: str, provider: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message
        self.provider = provider
        self.status_code = status_code
        super().__init__(message)

    def __str__(self):
        return self.message


class ParseError(QuotexError):
    """QUOTES_JSON trailer could not be decoded. Never surfaced to the user."""

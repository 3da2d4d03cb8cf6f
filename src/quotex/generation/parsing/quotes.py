from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

from quotex.core.errors import ParseError
from quotex.core.types import QueryResult, QuoteCandidate

logger = logging.getLogger(__name__)

QUOTES_MARKER = "QUOTES_JSON:"

_decoder = json.JSONDecoder()


def split_reply(text: str) -> tuple[str, Optional[str]]:
    """
    Split a reply at the first QUOTES_JSON marker.

    Returns:
        (answer, trailer) where answer is everything before the marker, stripped,
        and trailer is everything after it, or None when the marker is absent.
    """
    text = text or ""
    start = text.find(QUOTES_MARKER)
    if start == -1:
        return text.strip(), None
    return text[:start].strip(), text[start + len(QUOTES_MARKER):]


def decode_quotes_trailer(trailer: str) -> List[Dict[str, Any]]:
    """
    Decode the JSON object following the marker.

    Only the first complete JSON value is read; whatever follows it is ignored.

    Raises:
        ParseError: If the trailer is truncated, malformed, or not {"quotes": [...]}.
    """
    payload = trailer.lstrip()
    if not payload.startswith("{"):
        raise ParseError(f"Expected a JSON object after marker, got: {payload[:40]!r}")

    try:
        parsed, end = _decoder.raw_decode(payload)
    except json.JSONDecodeError as e:
        raise ParseError(f"JSON decode error: {e}") from e

    if not isinstance(parsed, dict):
        raise ParseError(f"Expected dict, got {type(parsed).__name__}")

    quotes = parsed.get("quotes")
    if not isinstance(quotes, list):
        raise ParseError("Missing 'quotes' array")

    if payload[end:].strip():
        logger.debug(f"Ignoring {len(payload[end:])} chars after quotes object")

    return quotes


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def to_quote_candidates(raw_quotes: List[Any]) -> List[QuoteCandidate]:
    """Coerce decoded entries into QuoteCandidates. Partial objects are kept; non-objects are dropped."""
    candidates = []
    for idx, raw in enumerate(raw_quotes, 1):
        if not isinstance(raw, dict):
            logger.debug(f"Skipping non-object quote entry #{idx}: {raw!r}")
            continue
        quote_id = raw.get("id")
        candidates.append(QuoteCandidate(
            id=str(quote_id) if quote_id not in (None, "") else f"q{idx}",
            quote=str(raw.get("quote") or ""),
            source=str(raw.get("source") or ""),
            page=_as_int(raw.get("page")),
            score=_as_float(raw.get("score")),
        ))
    return candidates


def parse_response(text: str) -> QueryResult:
    """
    Split a provider reply into the answer and its quote candidates.

    The answer is always cut at the marker start, whether or not the trailer
    decodes. A bad trailer yields zero quotes.
    """
    answer, trailer = split_reply(text)
    if trailer is None:
        return QueryResult(answer=answer, quotes=[])

    try:
        quotes = to_quote_candidates(decode_quotes_trailer(trailer))
    except ParseError as e:
        logger.warning(f"Quote trailer not parsed, returning no quotes: {e}")
        quotes = []

    logger.debug(f"Parsed reply: answer_length={len(answer)}, quotes={len(quotes)}")
    return QueryResult(answer=answer, quotes=quotes)

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Optional

import requests

from quotex.core.errors import ProviderError

logger = logging.getLogger(__name__)

_KEY_PARAM = re.compile(r"([?&]key=)[^&\s)'\"]+")
REDACTED = "***"


def redact_transport_error(text: str, params: Optional[Dict[str, str]] = None) -> str:
    """Strip query-string credentials (Gemini's ?key=) from a transport error message."""
    for value in (params or {}).values():
        if value:
            text = text.replace(str(value), REDACTED)
    return _KEY_PARAM.sub(rf"\g<1>{REDACTED}", text)


def extract_error_message(data: Any, fallback: str) -> str:
    """Pull error.message out of a provider error body; all three providers use that shape."""
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if isinstance(error, str) and error:
            return error
    return fallback


def post_json(
        session: requests.Session,
        url: str,
        *,
        provider: str,
        label: str,
        payload: Dict[str, Any],
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
) -> Dict[str, Any]:
    """
    POST a JSON payload and return the decoded JSON body.

    Args:
        session: HTTP session used for the call
        url: Full endpoint URL (without query string)
        provider: Provider key, attached to raised errors
        label: Human label used in the fallback error message ("OpenAI" -> "OpenAI error")
        payload: Request body
        headers: Extra request headers
        params: Query string parameters
        timeout: Seconds, or None for no timeout

    Raises:
        ProviderError: On transport failure, non-2xx status, or non-JSON body.
    """
    request_headers = {"Content-Type": "application/json"}
    request_headers.update(headers or {})
    fallback = f"{label} error"

    logger.info(f"🔍 Making request to: {url}")
    try:
        response = session.post(
            url,
            json=payload,
            headers=request_headers,
            params=params,
            timeout=timeout,
        )
    except requests.exceptions.RequestException as e:
        message = redact_transport_error(str(e), params) or f"{label} request failed: {type(e).__name__}"
        logger.error(f"❌ {label} request failed: {message}")
        raise ProviderError(message, provider=provider) from None

    try:
        data = response.json()
    except ValueError as e:
        logger.error(f"❌ {label} returned non-JSON body (status {response.status_code})")
        message = fallback if not response.ok else f"{label} returned a malformed response"
        raise ProviderError(message, provider=provider, status_code=response.status_code) from e

    if not response.ok:
        message = extract_error_message(data, fallback)
        logger.error(f"❌ {label} HTTP {response.status_code}: {message}")
        raise ProviderError(message, provider=provider, status_code=response.status_code)

    return data

"""Pytest configuration and shared fixtures."""
import os
import sys
from typing import Any, Optional
from unittest.mock import Mock

import pytest
import requests

# Ensure src is on path for imports
ROOT = os.path.dirname(os.path.abspath(__file__))
SRC = os.path.join(os.path.dirname(ROOT), 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from quotex.corpus.store import DocumentStore  # noqa: E402

WORKED_EXAMPLE_REPLY = (
    '[1] "Hello world" (A, p. 1)\n'
    'QUOTES_JSON:{"quotes":[{"id":"q1","quote":"Hello world","source":"A","page":1,"score":0.9}]}'
)


def make_response(status_code: int = 200, json_body: Any = None, json_error: Optional[Exception] = None) -> Mock:
    """Build a stand-in for requests.Response."""
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_body
    return response


@pytest.fixture
def mock_session():
    """requests.Session whose post() returns a 200 with an empty JSON object unless reconfigured."""
    session = Mock(spec=requests.Session)
    session.post.return_value = make_response(200, {})
    return session


@pytest.fixture
def store() -> DocumentStore:
    store = DocumentStore()
    store.add("Hello world", "A")
    return store


@pytest.fixture
def hebrew_store() -> DocumentStore:
    store = DocumentStore()
    store.add("שלום עולם. זהו מסמך לדוגמה.", "מאמר 1")
    store.add("Second document body", "Article 2")
    return store


@pytest.fixture
def worked_example_reply() -> str:
    return WORKED_EXAMPLE_REPLY


@pytest.fixture
def response_factory():
    return make_response

"""Tests for the relay HTTP surface (upstream provider is faked)."""
import pytest
from fastapi.testclient import TestClient

from quotex.api.dependencies import (
    get_document_store,
    get_prompt_builder,
    get_relay_credential,
    get_relay_provider,
)
from quotex.api.main import app
from quotex.api.routers.query import NO_DOCUMENTS_ANSWER
from quotex.api.schemas import ErrorResponse
from quotex.core.errors import ProviderError
from quotex.corpus.store import DocumentStore
from quotex.generation.prompts.builder import PromptBuilder
from quotex.generation.prompts.utils.prompt_config import PromptConfig


class FakeRelayProvider:
    key = "openai"
    label = "OpenAI"

    def __init__(self, reply: str = "", error: Exception = None):
        self.reply = reply
        self.error = error
        self.calls = []

    def complete(self, credential, system_prompt, user_message):
        self.calls.append((credential, system_prompt, user_message))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def relay_store() -> DocumentStore:
    return DocumentStore()


@pytest.fixture
def fake_provider(worked_example_reply) -> FakeRelayProvider:
    return FakeRelayProvider(reply=worked_example_reply)


@pytest.fixture
def client(relay_store, fake_provider):
    app.dependency_overrides[get_document_store] = lambda: relay_store
    app.dependency_overrides[get_prompt_builder] = lambda: PromptBuilder(
        PromptConfig(doc_char_limit=15000, template_set="relay")
    )
    app.dependency_overrides[get_relay_provider] = lambda: fake_provider
    app.dependency_overrides[get_relay_credential] = lambda: "sk-relay"
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_add_text(client, relay_store):
    response = client.post("/api/text", json={"name": "Article 1", "text": "Hello world"})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["document"]["name"] == "Article 1"
    assert body["document"]["size"] == 11
    assert body["document"]["uploadedAt"].endswith("Z")
    assert "text" not in body["document"]
    assert len(relay_store) == 1


def test_add_text_default_name(client):
    response = client.post("/api/text", json={"text": "x"})

    assert response.json()["document"]["name"] == "Document"


@pytest.mark.parametrize("payload", [{"name": "Empty"}, {"text": "   "}, {}])
def test_add_text_rejects_blank(client, relay_store, payload):
    response = client.post("/api/text", json=payload)

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "No text provided"}
    assert len(relay_store) == 0


def test_clear_documents(client, relay_store):
    relay_store.add("one")

    response = client.delete("/api/documents")

    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert len(relay_store) == 0


def test_query_worked_example(client, relay_store, fake_provider):
    relay_store.add("Hello world", "A")

    response = client.post("/api/query", json={"prompt": "What is this?", "strictQuotesOnly": True})

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "answer": '[1] "Hello world" (A, p. 1)',
        "quotes": [{"id": "q1", "quote": "Hello world", "source": "A", "page": 1, "score": 0.9}],
    }
    credential, system_prompt, user_message = fake_provider.calls[0]
    assert credential == "sk-relay"
    assert system_prompt.startswith("You are a strict academic assistant. Answer ONLY with exact quotes from the documents below.")
    assert user_message == "Documents:\n\n--- A ---\nHello world\n\nQuestion: What is this?"


def test_query_relaxed_mode(client, relay_store, fake_provider):
    relay_store.add("Hello world", "A")

    client.post("/api/query", json={"prompt": "q", "strictQuotesOnly": False})

    assert fake_provider.calls[0][1].startswith("You are an academic assistant.")


def test_query_without_documents_returns_fixed_answer(client, fake_provider):
    response = client.post("/api/query", json={"prompt": "anything"})

    assert response.status_code == 200
    assert response.json() == {"success": True, "answer": NO_DOCUMENTS_ANSWER, "quotes": []}
    assert fake_provider.calls == []


@pytest.mark.parametrize("payload", [{}, {"prompt": ""}, {"prompt": "  "}])
def test_query_requires_prompt(client, relay_store, fake_provider, payload):
    relay_store.add("Hello world", "A")

    response = client.post("/api/query", json=payload)

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Prompt is required"}
    assert fake_provider.calls == []


def test_query_upstream_failure_is_500(client, relay_store, fake_provider):
    relay_store.add("Hello world", "A")
    fake_provider.error = ProviderError("Rate limit reached", provider="openai", status_code=429)

    response = client.post("/api/query", json={"prompt": "q"})

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Rate limit reached"}


def test_query_without_relay_key_is_500(client, relay_store, fake_provider):
    relay_store.add("Hello world", "A")
    app.dependency_overrides[get_relay_credential] = lambda: ""

    response = client.post("/api/query", json={"prompt": "q"})

    assert response.status_code == 500
    assert response.json()["success"] is False
    assert fake_provider.calls == []


def test_query_uses_relay_document_cap(client, relay_store, fake_provider):
    relay_store.add("x" * 20000, "Big")

    client.post("/api/query", json={"prompt": "q"})

    user_message = fake_provider.calls[0][2]
    assert user_message.count("x") == 15000


def test_error_envelope_matches_schema(client, relay_store, fake_provider):
    relay_store.add("Hello world", "A")
    fake_provider.error = ProviderError("Upstream down", provider="openai")

    response = client.post("/api/query", json={"prompt": "q"})

    assert ErrorResponse.model_validate(response.json()) == ErrorResponse(error="Upstream down")

"""Tests for the chat provider strategies (no real HTTP; the session is mocked)."""
import logging

import pytest
import requests

from quotex.core.errors import ProviderError, ValidationError
from quotex.generation.providers.anthropic_provider import ClaudeProvider
from quotex.generation.providers.factory import Provider, complete, get_provider, resolve_provider
from quotex.generation.providers.gemini_provider import GeminiProvider
from quotex.generation.providers.helpers.http import extract_error_message, redact_transport_error
from quotex.generation.providers.openai_provider import OpenAIProvider

OPENAI_REPLY = {"choices": [{"message": {"content": "openai says hi"}}]}
CLAUDE_REPLY = {"content": [{"type": "text", "text": "claude says hi"}]}
GEMINI_REPLY = {"candidates": [{"content": {"parts": [{"text": "gemini says hi"}]}}]}


class TestOpenAIProvider:

    def test_request_shape(self, mock_session, response_factory):
        mock_session.post.return_value = response_factory(200, OPENAI_REPLY)
        provider = OpenAIProvider(base_url="https://api.openai.com/", model="gpt-4o", max_tokens=4000,
                                  session=mock_session)

        reply = provider.complete("sk-test", "SYS", "USER")

        assert reply == "openai says hi"
        args, kwargs = mock_session.post.call_args
        assert args[0] == "https://api.openai.com/v1/chat/completions"
        assert kwargs["headers"]["Authorization"] == "Bearer sk-test"
        assert kwargs["headers"]["Content-Type"] == "application/json"
        assert kwargs["json"] == {
            "model": "gpt-4o",
            "max_tokens": 4000,
            "messages": [
                {"role": "system", "content": "SYS"},
                {"role": "user", "content": "USER"},
            ],
        }
        assert kwargs["params"] is None

    def test_error_message_surfaced(self, mock_session, response_factory):
        mock_session.post.return_value = response_factory(401, {"error": {"message": "Incorrect API key provided"}})
        provider = OpenAIProvider(session=mock_session)

        with pytest.raises(ProviderError) as exc_info:
            provider.complete("bad", "S", "U")

        assert str(exc_info.value) == "Incorrect API key provided"
        assert exc_info.value.status_code == 401
        assert exc_info.value.provider == "openai"

    def test_non_json_error_body_uses_fallback(self, mock_session, response_factory):
        mock_session.post.return_value = response_factory(502, json_error=ValueError("no json"))
        provider = OpenAIProvider(session=mock_session)

        with pytest.raises(ProviderError, match="^OpenAI error$"):
            provider.complete("k", "S", "U")

    def test_error_body_without_message_uses_fallback(self, mock_session, response_factory):
        mock_session.post.return_value = response_factory(500, {"detail": "boom"})
        provider = OpenAIProvider(session=mock_session)

        with pytest.raises(ProviderError, match="^OpenAI error$"):
            provider.complete("k", "S", "U")

    def test_missing_choices_is_provider_error(self, mock_session, response_factory):
        mock_session.post.return_value = response_factory(200, {"choices": []})
        provider = OpenAIProvider(session=mock_session)

        with pytest.raises(ProviderError):
            provider.complete("k", "S", "U")

    def test_null_content_becomes_empty_string(self, mock_session, response_factory):
        mock_session.post.return_value = response_factory(200, {"choices": [{"message": {"content": None}}]})
        provider = OpenAIProvider(session=mock_session)

        assert provider.complete("k", "S", "U") == ""

    def test_transport_error_wrapped(self, mock_session):
        mock_session.post.side_effect = requests.exceptions.ConnectionError("connection refused")
        provider = OpenAIProvider(session=mock_session)

        with pytest.raises(ProviderError, match="connection refused"):
            provider.complete("k", "S", "U")


class TestClaudeProvider:

    def test_request_shape(self, mock_session, response_factory):
        mock_session.post.return_value = response_factory(200, CLAUDE_REPLY)
        provider = ClaudeProvider(base_url="https://api.anthropic.com", model="claude-sonnet-4-20250514",
                                  max_tokens=4000, anthropic_version="2023-06-01", session=mock_session)

        reply = provider.complete("ant-key", "SYS", "USER")

        assert reply == "claude says hi"
        args, kwargs = mock_session.post.call_args
        assert args[0] == "https://api.anthropic.com/v1/messages"
        assert kwargs["headers"]["x-api-key"] == "ant-key"
        assert kwargs["headers"]["anthropic-version"] == "2023-06-01"
        assert "Authorization" not in kwargs["headers"]
        assert kwargs["json"] == {
            "model": "claude-sonnet-4-20250514",
            "max_tokens": 4000,
            "system": "SYS",
            "messages": [{"role": "user", "content": "USER"}],
        }

    def test_error_message_surfaced(self, mock_session, response_factory):
        body = {"type": "error", "error": {"type": "authentication_error", "message": "invalid x-api-key"}}
        mock_session.post.return_value = response_factory(401, body)
        provider = ClaudeProvider(session=mock_session)

        with pytest.raises(ProviderError, match="invalid x-api-key"):
            provider.complete("bad", "S", "U")

    def test_non_json_error_body_uses_fallback(self, mock_session, response_factory):
        mock_session.post.return_value = response_factory(529, json_error=ValueError("html"))
        provider = ClaudeProvider(session=mock_session)

        with pytest.raises(ProviderError, match="^Claude error$"):
            provider.complete("k", "S", "U")

    def test_missing_content_is_provider_error(self, mock_session, response_factory):
        mock_session.post.return_value = response_factory(200, {"content": []})
        provider = ClaudeProvider(session=mock_session)

        with pytest.raises(ProviderError):
            provider.complete("k", "S", "U")


class TestGeminiProvider:

    def test_request_shape(self, mock_session, response_factory):
        mock_session.post.return_value = response_factory(200, GEMINI_REPLY)
        provider = GeminiProvider(base_url="https://generativelanguage.googleapis.com", model="gemini-1.5-pro",
                                  max_tokens=4000, session=mock_session)

        reply = provider.complete("g-key", "SYS", "USER")

        assert reply == "gemini says hi"
        args, kwargs = mock_session.post.call_args
        assert args[0] == "https://generativelanguage.googleapis.com/v1beta/models/gemini-1.5-pro:generateContent"
        assert kwargs["params"] == {"key": "g-key"}
        assert "Authorization" not in kwargs["headers"]
        assert "x-api-key" not in kwargs["headers"]
        assert kwargs["json"] == {
            "contents": [{"parts": [{"text": "SYS\n\nUSER"}]}],
            "generationConfig": {"maxOutputTokens": 4000},
        }

    def test_error_message_surfaced(self, mock_session, response_factory):
        body = {"error": {"code": 400, "message": "API key not valid", "status": "INVALID_ARGUMENT"}}
        mock_session.post.return_value = response_factory(400, body)
        provider = GeminiProvider(session=mock_session)

        with pytest.raises(ProviderError, match="API key not valid"):
            provider.complete("bad", "S", "U")

    def test_transport_error_does_not_leak_key(self, mock_session, caplog):
        mock_session.post.side_effect = requests.exceptions.ConnectionError(
            "HTTPSConnectionPool(host='127.0.0.1', port=9): Max retries exceeded with url: "
            "/v1beta/models/gemini-1.5-pro:generateContent?key=SECRET-GEMINI-KEY "
            "(Caused by NewConnectionError('Connection refused'))"
        )
        provider = GeminiProvider(session=mock_session)

        with caplog.at_level(logging.DEBUG):
            with pytest.raises(ProviderError) as exc_info:
                provider.complete("SECRET-GEMINI-KEY", "S", "U")

        assert "SECRET-GEMINI-KEY" not in str(exc_info.value)
        assert "Max retries exceeded" in str(exc_info.value)
        assert exc_info.value.__cause__ is None
        assert "SECRET-GEMINI-KEY" not in caplog.text

    def test_missing_candidates_is_provider_error(self, mock_session, response_factory):
        mock_session.post.return_value = response_factory(200, {"promptFeedback": {"blockReason": "SAFETY"}})
        provider = GeminiProvider(session=mock_session)

        with pytest.raises(ProviderError):
            provider.complete("k", "S", "U")


class TestFactory:

    @pytest.mark.parametrize("value,expected", [
        ("openai", Provider.OPENAI),
        (" Claude ", Provider.CLAUDE),
        ("GEMINI", Provider.GEMINI),
        (Provider.GEMINI, Provider.GEMINI),
    ])
    def test_resolve_provider(self, value, expected):
        assert resolve_provider(value) is expected

    def test_unknown_provider_rejected(self):
        with pytest.raises(ValidationError, match="Unknown provider"):
            resolve_provider("mistral")

    @pytest.mark.parametrize("kind,cls", [
        (Provider.OPENAI, OpenAIProvider),
        (Provider.CLAUDE, ClaudeProvider),
        (Provider.GEMINI, GeminiProvider),
    ])
    def test_get_provider_builds_matching_strategy(self, kind, cls, mock_session):
        strategy = get_provider(kind, session=mock_session)

        assert isinstance(strategy, cls)
        assert strategy.session is mock_session

    @pytest.mark.parametrize("credential", ["", "   "])
    def test_blank_credential_rejected_before_network(self, credential, mock_session):
        with pytest.raises(ValidationError, match="API key is required"):
            complete(Provider.OPENAI, credential, "S", "U", session=mock_session)

        mock_session.post.assert_not_called()

    def test_credential_is_trimmed(self, mock_session, response_factory):
        mock_session.post.return_value = response_factory(200, OPENAI_REPLY)

        complete(Provider.OPENAI, "  sk-test \n", "S", "U", session=mock_session)

        _, kwargs = mock_session.post.call_args
        assert kwargs["headers"]["Authorization"] == "Bearer sk-test"

    def test_switching_provider_does_not_mix_auth(self, mock_session, response_factory):
        mock_session.post.side_effect = [
            response_factory(200, OPENAI_REPLY),
            response_factory(200, GEMINI_REPLY),
            response_factory(200, CLAUDE_REPLY),
        ]

        assert complete("openai", "k1", "S", "U", session=mock_session) == "openai says hi"
        assert complete("gemini", "k2", "S", "U", session=mock_session) == "gemini says hi"
        assert complete("claude", "k3", "S", "U", session=mock_session) == "claude says hi"

        openai_call, gemini_call, claude_call = mock_session.post.call_args_list
        assert openai_call.kwargs["params"] is None
        assert "Authorization" not in gemini_call.kwargs["headers"]
        assert gemini_call.kwargs["params"] == {"key": "k2"}
        assert "Authorization" not in claude_call.kwargs["headers"]
        assert claude_call.kwargs["params"] is None


@pytest.mark.parametrize("data,expected", [
    ({"error": {"message": "nope"}}, "nope"),
    ({"error": "plain string"}, "plain string"),
    ({"error": {}}, "Fallback"),
    ([1, 2, 3], "Fallback"),
    (None, "Fallback"),
])
def test_extract_error_message(data, expected):
    assert extract_error_message(data, "Fallback") == expected


@pytest.mark.parametrize("text,params,expected", [
    ("url: /m:generateContent?key=abc123 (refused)", None, "url: /m:generateContent?key=*** (refused)"),
    ("url: /m?alt=json&key=abc123", None, "url: /m?alt=json&key=***"),
    ("failed for abc123", {"key": "abc123"}, "failed for ***"),
    ("connection refused", None, "connection refused"),
])
def test_redact_transport_error(text, params, expected):
    assert redact_transport_error(text, params) == expected

"""Tests for domain value objects and entities."""

import pytest

from prompt_gateway.domain.entities import GenerationRequest, TransportResponse
from prompt_gateway.domain.exceptions import (
    ApiCommunicationError,
    ApiError,
    ContentError,
    InvalidPromptError,
    PromptGatewayError,
    SafetyError,
)
from prompt_gateway.domain.value_objects import GenerationEndpoint, Prompt


class TestPrompt:
    def test_keeps_text_verbatim(self):
        assert Prompt.from_string("  hi there \n").text == "  hi there \n"

    @pytest.mark.parametrize("value", [None, "", " ", "\t\n\r "])
    def test_rejects_blank(self, value):
        with pytest.raises(InvalidPromptError):
            Prompt.from_string(value)


class TestGenerationRequest:
    def test_canonical_payload(self):
        assert GenerationRequest.for_prompt("hello").to_payload() == {
            "contents": [{"role": "user", "parts": [{"text": "hello"}]}]
        }

    def test_each_call_builds_a_fresh_payload(self):
        first = GenerationRequest.for_prompt("x").to_payload()
        second = GenerationRequest.for_prompt("x").to_payload()
        assert first == second
        assert first is not second


class TestGenerationEndpoint:
    def test_url_embeds_key(self):
        endpoint = GenerationEndpoint(api_key="abc123", model="gemini-2.0-flash")
        assert endpoint.url == (
            "https://generativelanguage.googleapis.com/v1beta/models/"
            "gemini-2.0-flash:generateContent?key=abc123"
        )

    def test_trailing_slash_in_base_url(self):
        endpoint = GenerationEndpoint(api_key="k", model="m", base_url="https://example.test/models/")
        assert endpoint.url == "https://example.test/models/m:generateContent?key=k"

    def test_key_hidden(self):
        endpoint = GenerationEndpoint(api_key="abc123")
        assert "abc123" not in repr(endpoint)
        assert "abc123" not in endpoint.redacted_url
        assert endpoint.redacted_url.endswith(":generateContent?key=***")


class TestTransportResponse:
    @pytest.mark.parametrize("status,expected", [(200, True), (204, True), (299, True), (199, False), (300, False), (500, False)])
    def test_is_success(self, status, expected):
        assert TransportResponse(status_code=status).is_success is expected


class TestExceptionHierarchy:
    def test_all_share_base(self):
        for exc_type in (InvalidPromptError, ApiError, ApiCommunicationError, ContentError, SafetyError):
            assert issubclass(exc_type, PromptGatewayError)

    def test_safety_is_not_content_error(self):
        assert not issubclass(SafetyError, ContentError)

    def test_communication_error_is_api_error(self):
        assert issubclass(ApiCommunicationError, ApiError)

    def test_api_error_carries_status(self):
        assert ApiError("API returned HTTP 503", status_code=503).status_code == 503
        assert ApiCommunicationError("down").status_code is None
